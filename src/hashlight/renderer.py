"""HTML renderer for tokenized lines.

Renders each token as a flat <span> carrying its scopes in a title
attribute, and a foreground color when the token is name-like. Lines end
in <br>; the whole fragment is wrapped in <pre><code>.

Escaping:
By default token text and scope names are written verbatim, so source
containing "<" or "&" produces markup the browser will reinterpret. Set
HighlightConfig(escape_html=True) to escape both.

Thread Safety:
HtmlRenderer holds only its immutable config. Each render() call builds
its own StringBuilder, so one renderer can be shared across threads.
"""

import logging
from collections.abc import Iterable

from hashlight.colors import is_name_like
from hashlight.config import HighlightConfig, get_highlight_config
from hashlight.stringbuilder import StringBuilder
from hashlight.tokens import Token
from hashlight.utils.hashing import crc8
from hashlight.utils.logger import get_logger
from hashlight.utils.text import escape_html

logger = get_logger(__name__)


class HtmlRenderer:
    """Render token lines to a <pre><code> fragment.

    Args:
        config: Configuration to use. When None, the context config from
            hashlight.config is read at each render() call.

    Example:
        >>> renderer = HtmlRenderer()
        >>> renderer.render([[Token("x", ("variable.other",))]])
        '<pre><code><span style="color:#c689c8" title="variable.other">x</span><br></code></pre>'
    """

    __slots__ = ("_config",)

    def __init__(self, config: HighlightConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> HighlightConfig:
        return self._config if self._config is not None else get_highlight_config()

    def render(self, lines: Iterable[Iterable[Token]]) -> str:
        """Render every line, consuming the iterable to exhaustion."""
        config = self.config
        sb = StringBuilder()
        sb.append("<pre><code>")
        for line in lines:
            for token in line:
                self._render_token(token, sb, config)
            sb.append("<br>")
        sb.append("</code></pre>")
        return sb.build()

    def style_attribute(self, token: Token, config: HighlightConfig | None = None) -> str:
        """Inline style for a token, or "" when it is not name-like."""
        config = config if config is not None else self.config
        if not is_name_like(token, config.name_prefixes):
            return ""

        index = config.colors.index_for(token.text)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("crc8(%r) = %d, color index %d", token.text, crc8(token.text), index)
        color = config.colors[index]
        return f'style="color:{color}"'

    def _render_token(self, token: Token, sb: StringBuilder, config: HighlightConfig) -> None:
        title = config.scope_separator.join(token.scopes)
        text = token.text
        if config.escape_html:
            title = escape_html(title)
            text = escape_html(text)

        style = self.style_attribute(token, config)
        if style:
            sb.append(f'<span {style} title="{title}">')
        else:
            sb.append(f'<span title="{title}">')
        sb.append(text)
        sb.append("</span>")


def render(lines: Iterable[Iterable[Token]], config: HighlightConfig | None = None) -> str:
    """Render token lines to HTML.

    Args:
        lines: One iterable of tokens per line, typically a TokenStream
        config: Optional config (defaults to the context config)

    Returns:
        A complete <pre><code>...</code></pre> fragment
    """
    return HtmlRenderer(config).render(lines)


def wrap_document(fragment: str) -> str:
    """Wrap a rendered fragment in a minimal HTML page."""
    return f"<!DOCTYPE html><html><body>{fragment}</body></html>"
