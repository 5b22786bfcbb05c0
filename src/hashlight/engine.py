"""TextMate engine binding backed by babi.

babi implements TextMate rule-stack semantics on top of onigurumacffi.
BabiEngine adapts it to the Grammar / GrammarEngine protocols in
hashlight.protocols.

babi matches against newline-terminated lines, and expects to be told
whether a line is the first of the document (for \\A anchors). The rule
stack handed out here pairs babi's state with that flag.

Example:
    >>> engine = BabiEngine.default()
    >>> grammar = engine.load_grammar("source.ts")
    >>> result = grammar.tokenize_line("let x = 1;", grammar.initial_state)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, NamedTuple

from babi.highlight import Compiler, Grammars, highlight_line

from hashlight.grammars import bundled_grammar_dirs
from hashlight.tokens import LineResult, TokenSpan
from hashlight.utils.logger import get_logger

logger = get_logger(__name__)


class BabiRuleStack(NamedTuple):
    """babi state plus whether the next line is the document's first."""

    state: Any
    first_line: bool


class BabiGrammar:
    """A compiled babi grammar for one root scope."""

    __slots__ = ("_compiler", "_scope_name", "_initial_state")

    def __init__(self, compiler: Compiler, scope_name: str) -> None:
        self._compiler = compiler
        self._scope_name = scope_name
        self._initial_state = BabiRuleStack(compiler.root_state, True)

    @property
    def scope_name(self) -> str:
        return self._scope_name

    @property
    def initial_state(self) -> BabiRuleStack:
        return self._initial_state

    def tokenize_line(self, line: str, rule_stack: BabiRuleStack) -> LineResult:
        """Tokenize one line.

        Spans are clipped to the line (babi also scopes the newline we
        append), empty spans are dropped, and any uncovered gap is filled
        with the root scope so the spans always cover the whole line.
        """
        state, regions = highlight_line(
            self._compiler,
            rule_stack.state,
            f"{line}\n",
            first_line=rule_stack.first_line,
        )

        spans: list[TokenSpan] = []
        pos = 0
        end_of_line = len(line)
        for region in regions:
            start = max(region.start, pos)
            end = min(region.end, end_of_line)
            if start >= end:
                continue
            if start > pos:
                spans.append(TokenSpan(pos, start, (self._scope_name,)))
            spans.append(TokenSpan(start, end, tuple(region.scope)))
            pos = end
        if pos < end_of_line:
            spans.append(TokenSpan(pos, end_of_line, (self._scope_name,)))

        return LineResult(tuple(spans), BabiRuleStack(state, False))


class BabiEngine:
    """Loads babi grammars from grammar directories.

    Args:
        directories: Grammar directories, highest priority first (the same
            order GrammarRegistry takes)

    Thread Safety:
        babi compiles rules lazily and caches them on the shared Grammars
        object. Tokenize from one thread at a time.

    """

    def __init__(self, directories: Iterable[str]) -> None:
        self._directories = tuple(directories)
        # babi lets later directories override earlier ones
        self._grammars = Grammars(*reversed(self._directories))
        self._loaded: dict[str, BabiGrammar] = {}

    @classmethod
    def default(cls, extra_dirs: Iterable[str] = ()) -> BabiEngine:
        """Engine over extra_dirs followed by the bundled grammars."""
        return cls((*extra_dirs, *bundled_grammar_dirs()))

    def load_grammar(self, scope_name: str) -> BabiGrammar | None:
        """Compile the grammar for a scope, or None if babi cannot."""
        try:
            return self._loaded[scope_name]
        except KeyError:
            pass

        try:
            compiler = self._grammars.compiler_for_scope(scope_name)
        except (KeyError, ValueError):
            logger.debug("babi could not load grammar %s", scope_name, exc_info=True)
            return None

        logger.debug("Loaded grammar %s", scope_name)
        grammar = self._loaded[scope_name] = BabiGrammar(compiler, scope_name)
        return grammar
