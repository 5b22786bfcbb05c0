"""
hashlight: TextMate tokenization rendered as hash-colored HTML

Tokenizes source code with TextMate grammars (via babi) and renders every
token as a <span> titled with its scopes. Identifier-like tokens get a
color derived from a CRC-8 of their text, so the same name has the same
color everywhere.

Quick Start:
    >>> from hashlight import highlight
    >>> html = highlight("let x = 1;", "ts")

    >>> # Or drive the pieces yourself
    >>> from hashlight import GrammarRegistry, BabiEngine, tokenize, render
    >>> grammar = BabiEngine.default().load_grammar("source.ts")
    >>> html = render(tokenize("let x = 1;", grammar))

Installation:
    pip install hashlight
"""

from hashlight.colors import DEFAULT_COLOR_TABLE, ColorTable, is_name_like
from hashlight.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from hashlight.engine import BabiEngine, BabiGrammar
from hashlight.errors import ConfigError, GrammarLoadError, GrammarNotFoundError, HashlightError
from hashlight.grammars import GrammarInfo, GrammarRegistry
from hashlight.highlighting import Highlighter, get_highlighter, highlight, set_highlighter
from hashlight.protocols import Grammar, GrammarEngine, GrammarResolver
from hashlight.renderer import HtmlRenderer, render, wrap_document
from hashlight.tokenizer import TokenStream, tokenize
from hashlight.tokens import LineResult, Token, TokenSpan

__version__ = "0.1.0"

__all__ = [
    "BabiEngine",
    "BabiGrammar",
    "ColorTable",
    "ConfigError",
    "DEFAULT_COLOR_TABLE",
    "Grammar",
    "GrammarEngine",
    "GrammarInfo",
    "GrammarLoadError",
    "GrammarNotFoundError",
    "GrammarRegistry",
    "GrammarResolver",
    "HashlightError",
    "HighlightConfig",
    "Highlighter",
    "HtmlRenderer",
    "LineResult",
    "Token",
    "TokenSpan",
    "TokenStream",
    "__version__",
    "get_highlight_config",
    "get_highlighter",
    "highlight",
    "highlight_config_context",
    "is_name_like",
    "render",
    "reset_highlight_config",
    "set_highlight_config",
    "set_highlighter",
    "tokenize",
    "wrap_document",
]
