"""ContextVar-based highlight configuration for hashlight.

Provides context-local configuration using Python's ContextVars (PEP 567).
The renderer reads the active config when none is passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from hashlight.config import HighlightConfig, highlight_config_context

    with highlight_config_context(HighlightConfig(escape_html=True)):
        html = highlight(code, "ts")

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType

from hashlight.colors import DEFAULT_COLOR_TABLE, NAME_SCOPE_PREFIXES, ColorTable
from hashlight.errors import ConfigError


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlight configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        colors: Palette used for name-like tokens
        name_prefixes: Scope prefixes that make a token name-like
        escape_html: Escape token text and scope titles. Off by default,
            which inserts both verbatim.
        scope_separator: String joining scopes in the title attribute
        grammar_dirs: Extra grammar directories searched before the bundled ones
        aliases: Extra language flags, mapped to scope names

    """

    colors: ColorTable = DEFAULT_COLOR_TABLE
    name_prefixes: tuple[str, ...] = NAME_SCOPE_PREFIXES
    escape_html: bool = False
    scope_separator: str = ","
    grammar_dirs: tuple[str, ...] = ()
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not self.name_prefixes:
            raise ConfigError("name_prefixes must not be empty")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HighlightConfig":
        """Create HighlightConfig from dictionary.

        Unknown keys are silently ignored. "colors" may be a list of color
        strings; list values for tuple fields are converted.

        Args:
            config_dict: Dictionary with config values. Keys should match
                HighlightConfig attribute names.

        Returns:
            New HighlightConfig instance with values from dict.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "colors": ["#000000", "#ffffff"],
            ...     "escape_html": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> len(config.colors)
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        colors = filtered.get("colors")
        if colors is not None and not isinstance(colors, ColorTable):
            filtered["colors"] = ColorTable.from_iterable(colors)
        for key in ("name_prefixes", "grammar_dirs"):
            if key in filtered:
                filtered[key] = tuple(filtered[key])
        if "aliases" in filtered:
            filtered["aliases"] = MappingProxyType(dict(filtered["aliases"]))
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlight configuration (context-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlight configuration for the current context.

    Args:
        config: HighlightConfig instance to use for this context.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to the module-level default configuration."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with highlight_config_context(HighlightConfig(escape_html=True)):
        ...     get_highlight_config().escape_html
        True

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
]
