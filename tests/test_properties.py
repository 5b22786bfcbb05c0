"""Property-based tests for tokenization and rendering using Hypothesis.

Invariants checked for arbitrary input:
1. Each line's token texts concatenate back to the line
2. One token list per newline-delimited segment
3. Colors depend only on the token text
4. Palette indices stay inside the table
5. No style attribute without a name-like scope
"""

from conftest import ScriptedGrammar
from hypothesis import given, settings
from hypothesis import strategies as st

from hashlight.colors import DEFAULT_COLOR_TABLE
from hashlight.renderer import HtmlRenderer, render
from hashlight.tokenizer import tokenize
from hashlight.tokens import Token

source_text = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=200)
plain_scopes = st.lists(
    st.sampled_from(["source.ts", "keyword.control", "string.quoted", "comment.line", "meta.variable"]),
    max_size=4,
).map(tuple)


class TestTokenizerProperties:
    """Tokenizer invariants."""

    @given(text=source_text)
    @settings(max_examples=100)
    def test_coverage(self, text: str) -> None:
        grammar = ScriptedGrammar({"x": ("variable",)})
        for original, tokens in zip(text.split("\n"), tokenize(text, grammar), strict=True):
            assert "".join(token.text for token in tokens) == original

    @given(text=source_text)
    @settings(max_examples=100)
    def test_line_count(self, text: str) -> None:
        assert len(list(tokenize(text, ScriptedGrammar()))) == text.count("\n") + 1


class TestColorProperties:
    """Color selection invariants."""

    @given(text=st.text(max_size=50))
    @settings(max_examples=200)
    def test_index_in_range(self, text: str) -> None:
        assert 0 <= DEFAULT_COLOR_TABLE.index_for(text) <= 59

    @given(text=st.text(max_size=50), first=plain_scopes, second=plain_scopes)
    @settings(max_examples=100)
    def test_color_depends_only_on_text(
        self, text: str, first: tuple[str, ...], second: tuple[str, ...]
    ) -> None:
        renderer = HtmlRenderer()
        a = renderer.style_attribute(Token(text, (*first, "variable.other")))
        b = renderer.style_attribute(Token(text, ("entity.name.type", *second)))
        assert a == b == f'style="color:{DEFAULT_COLOR_TABLE.color_for(text)}"'


class TestRendererProperties:
    """Renderer invariants."""

    @given(
        lines=st.lists(
            st.lists(st.builds(Token, st.text(alphabet="abc =;", max_size=8), plain_scopes), max_size=6),
            max_size=6,
        )
    )
    @settings(max_examples=100)
    def test_no_style_without_name_scopes(self, lines: list[list[Token]]) -> None:
        html = render(lines)
        assert "style=" not in html
        assert html.count("<br>") == len(lines)
