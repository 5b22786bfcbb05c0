"""Top-level highlight operation.

Resolves a language flag to a grammar, tokenizes the code line by line and
renders the result as HTML.

The default Highlighter is built on first use and reused for the rest of
the process: grammar directories are indexed and the engine is set up
exactly once, before the first line is tokenized.

Usage:
    from hashlight import highlight

    html = highlight("let x = 1;", "ts")

    # Manual injection
    from hashlight.highlighting import Highlighter, set_highlighter

    set_highlighter(Highlighter(my_resolver, my_engine))
"""

from __future__ import annotations

from collections.abc import Iterable

from hashlight.config import HighlightConfig, get_highlight_config
from hashlight.errors import GrammarLoadError, GrammarNotFoundError
from hashlight.protocols import Grammar, GrammarEngine, GrammarResolver
from hashlight.renderer import HtmlRenderer
from hashlight.tokenizer import tokenize
from hashlight.utils.logger import get_logger

logger = get_logger(__name__)


class Highlighter:
    """Flag lookup, grammar loading, tokenization and rendering.

    Args:
        resolver: Maps flags to grammar metadata and scopes to files
        engine: Loads grammars by scope name
        config: Render configuration (defaults to the context config)

    Thread Safety:
        Resolution and rendering are safe to share. Whether tokenizing is
        depends on the engine; BabiEngine should be used from one thread.

    """

    def __init__(
        self,
        resolver: GrammarResolver,
        engine: GrammarEngine,
        config: HighlightConfig | None = None,
    ) -> None:
        self.resolver = resolver
        self.engine = engine
        self._renderer = HtmlRenderer(config)

    @classmethod
    def from_directories(
        cls,
        extra_dirs: Iterable[str] = (),
        aliases: dict[str, str] | None = None,
        config: HighlightConfig | None = None,
    ) -> Highlighter:
        """Highlighter over extra_dirs plus the bundled babi grammars."""
        from hashlight.engine import BabiEngine
        from hashlight.grammars import GrammarRegistry

        extra_dirs = tuple(extra_dirs)
        return cls(
            GrammarRegistry.default(extra_dirs, aliases),
            BabiEngine.default(extra_dirs),
            config,
        )

    def load(self, flag: str) -> Grammar:
        """Resolve a flag to a loaded grammar.

        Raises:
            GrammarNotFoundError: unknown flag, or no file for its scope
            GrammarLoadError: the engine rejected the scope
        """
        info = self.resolver.find(flag)
        if info is None:
            raise GrammarNotFoundError(flag=flag)
        if self.resolver.path_for_scope(info.scope_name) is None:
            raise GrammarNotFoundError(scope_name=info.scope_name)

        grammar = self.engine.load_grammar(info.scope_name)
        if grammar is None:
            raise GrammarLoadError(info.scope_name)
        return grammar

    def highlight(self, code: str, flag: str) -> str:
        """Highlight code as the language named by flag.

        Engine errors raised while tokenizing propagate unchanged and
        abort the call; no partial output is produced.
        """
        grammar = self.load(flag)
        logger.debug("Highlighting %d characters as %s", len(code), flag)
        return self._renderer.render(tokenize(code, grammar))


# Global highlighter
_highlighter: Highlighter | None = None


def set_highlighter(highlighter: Highlighter | None) -> None:
    """Set the global highlighter.

    Pass None to rebuild the default on next use.
    """
    global _highlighter
    _highlighter = highlighter


def get_highlighter() -> Highlighter:
    """Get the global highlighter, building the default on first call.

    The default reads grammar_dirs and aliases from the context config at
    the time it is built.
    """
    global _highlighter
    if _highlighter is None:
        config = get_highlight_config()
        _highlighter = Highlighter.from_directories(config.grammar_dirs, dict(config.aliases))
    return _highlighter


def highlight(code: str, flag: str) -> str:
    """Highlight code using the global highlighter.

    Args:
        code: Source code
        flag: Language name or alias (e.g., "ts", "hs", "python")

    Returns:
        <pre><code>...</code></pre> fragment

    Raises:
        GrammarNotFoundError: flag or scope is unknown
        GrammarLoadError: the engine could not build the grammar
    """
    return get_highlighter().highlight(code, flag)
