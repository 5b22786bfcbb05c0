"""Line-by-line tokenization driver.

Feeds the lines of a text through a Grammar, carrying the engine's rule
stack from one line to the next, and hands back one list of Token objects
per line.

Laziness:
TokenStream is a forward-only iterator. A line is tokenized only when the
caller asks for it, so a consumer that stops early never pays for the rest
of the input.

Thread Safety:
A TokenStream owns its rule stack and must not be shared between threads.
Create one stream per input.

"""

from __future__ import annotations

from typing import Any

from hashlight.protocols import Grammar
from hashlight.tokens import LineTokens, Token


class TokenStream:
    """Pull-based iterator over the token lists of each line.

    Lines are split strictly on "\\n". Carriage returns stay in the line
    text, and a trailing newline produces a final empty line.

    Usage:
        >>> stream = TokenStream("a\\nb", grammar)
        >>> first = next(stream)  # only line 0 has been tokenized
        >>> rest = list(stream)

    """

    __slots__ = ("_grammar", "_lines", "_index", "_rule_stack")

    def __init__(self, text: str, grammar: Grammar) -> None:
        self._grammar = grammar
        self._lines = text.split("\n")
        self._index = 0
        self._rule_stack: Any = grammar.initial_state

    def __iter__(self) -> TokenStream:
        return self

    def __next__(self) -> LineTokens:
        if self._index >= len(self._lines):
            raise StopIteration

        line = self._lines[self._index]
        result = self._grammar.tokenize_line(line, self._rule_stack)
        tokens = [Token(line[span.start : span.end], tuple(span.scopes)) for span in result.spans]

        self._rule_stack = result.rule_stack
        self._index += 1
        return tokens

    @property
    def line_count(self) -> int:
        """Total number of lines in the input."""
        return len(self._lines)

    @property
    def lines_consumed(self) -> int:
        """Number of lines tokenized so far."""
        return self._index

    def close(self) -> None:
        """Stop the stream and drop the held rule stack."""
        self._index = len(self._lines)
        self._rule_stack = None


def tokenize(text: str, grammar: Grammar) -> TokenStream:
    """Tokenize text with a grammar, one line at a time.

    Args:
        text: Source code
        grammar: Loaded grammar (see hashlight.protocols.Grammar)

    Returns:
        TokenStream yielding one list of Token per line

    Example:
        >>> lines = tokenize("let x = 1;", grammar)
        >>> [token.text for token in next(lines)]
        ['let', ' ', 'x', ' ', '=', ' ', '1', ';']

    """
    return TokenStream(text, grammar)
