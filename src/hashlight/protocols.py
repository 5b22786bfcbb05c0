"""Protocols for the external pieces hashlight drives.

The grammar engine and the grammar resolver are injected capabilities. The
built-in implementations are BabiEngine (hashlight.engine) and
GrammarRegistry (hashlight.grammars); tests substitute scripted fakes.

Example:
    from hashlight.protocols import Grammar
    from hashlight.tokenizer import tokenize

    def first_line_tokens(grammar: Grammar, code: str) -> list[Token]:
        return next(tokenize(code, grammar))

"""

from typing import TYPE_CHECKING, Any, Protocol

from hashlight.tokens import LineResult

if TYPE_CHECKING:
    from hashlight.grammars import GrammarInfo


class Grammar(Protocol):
    """A loaded grammar that tokenizes one line at a time.

    The rule stack is opaque: callers only pass back whatever the previous
    call returned, starting from initial_state.

    """

    @property
    def initial_state(self) -> Any:
        """Rule stack to use for the first line of every run."""
        ...

    def tokenize_line(self, line: str, rule_stack: Any) -> LineResult:
        """Tokenize a single line.

        Args:
            line: Line text without its trailing newline
            rule_stack: State returned for the previous line, or initial_state

        Returns:
            Spans covering the line and the rule stack for the next line.

        """
        ...


class GrammarEngine(Protocol):
    """Loads grammars by scope name."""

    def load_grammar(self, scope_name: str) -> Grammar | None:
        """Return a usable grammar, or None if one cannot be built."""
        ...


class GrammarResolver(Protocol):
    """Maps language flags to grammar metadata and scopes to files."""

    def find(self, flag: str) -> "GrammarInfo | None":
        """Look up grammar metadata by name or alias."""
        ...

    def path_for_scope(self, scope_name: str) -> str | None:
        """Return the grammar definition path for a scope."""
        ...
