"""Exception classes for hashlight.

Provides standardized exceptions for grammar lookup and configuration.

Engine failures raised while tokenizing a line are not wrapped here. They
propagate to the caller of highlight() unchanged.
"""

from __future__ import annotations


class HashlightError(Exception):
    """Base exception for all hashlight errors.

    Subclass this for specific error categories.
    """

    pass


class GrammarNotFoundError(HashlightError):
    """No grammar is known for a language flag or scope name.

    Raised when a flag matches no grammar name or alias, or when the
    resolver has no definition file for a resolved scope.
    """

    def __init__(
        self,
        flag: str | None = None,
        scope_name: str | None = None,
    ) -> None:
        """Initialize with the flag or scope that failed to resolve.

        Args:
            flag: Language flag passed to highlight() (e.g., "ts")
            scope_name: Grammar scope name (e.g., "source.ts")
        """
        self.flag = flag
        self.scope_name = scope_name

        if flag is not None:
            message = f"Failed to find grammar for flag {flag!r}"
        else:
            message = f"Failed to find grammar file for scope name {scope_name!r}"
        super().__init__(message)


class GrammarLoadError(HashlightError):
    """The engine could not produce a grammar for a known scope."""

    def __init__(self, scope_name: str) -> None:
        self.scope_name = scope_name
        super().__init__(f"Failed to load grammar for scope name {scope_name!r}")


class ConfigError(HashlightError):
    """Invalid configuration value.

    Raised when building a color table or HighlightConfig from bad input.
    """

    pass
