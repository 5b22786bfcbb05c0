"""Token and engine result types for hashlight.

The engine reports each line as a list of TokenSpan objects plus the rule
stack to carry into the next line. The tokenizer slices the line with those
spans to produce Token objects that the renderer consumes.

Thread Safety:
All types here are immutable and safe to share across threads. The rule
stack inside LineResult is engine-owned and opaque.

"""

from dataclasses import dataclass
from typing import Any, NamedTuple


@dataclass(frozen=True, slots=True)
class Token:
    """A slice of one source line with the scopes the grammar assigned it.

    Attributes:
        text: Exact substring of the line
        scopes: Scope names in engine order, preserved verbatim for display

    """

    text: str
    scopes: tuple[str, ...]

    def has_scope_prefix(self, prefixes: tuple[str, ...]) -> bool:
        """True if any scope starts with any of the given prefixes."""
        return any(scope.startswith(prefixes) for scope in self.scopes)


class TokenSpan(NamedTuple):
    """Half-open [start, end) span of a line, as reported by the engine."""

    start: int
    end: int
    scopes: tuple[str, ...]


class LineResult(NamedTuple):
    """Engine output for one line."""

    spans: tuple[TokenSpan, ...]
    rule_stack: Any


# One list of tokens per input line
LineTokens = list[Token]
