"""Drive the renderer with a scripted grammar instead of babi.

Any object with initial_state and tokenize_line() satisfies the Grammar
protocol, which is handy for previewing palettes without a real grammar.
"""

import re

from hashlight import ColorTable, HighlightConfig, LineResult, TokenSpan, render, tokenize

WORD = re.compile(r"\w+|\W+")


class WordGrammar:
    """Scopes every word as a variable and everything else as punctuation."""

    initial_state = None

    def tokenize_line(self, line, rule_stack):
        spans = tuple(
            TokenSpan(m.start(), m.end(), ("variable.other" if m.group()[0].isalnum() else "punctuation",))
            for m in WORD.finditer(line)
        )
        return LineResult(spans, rule_stack)


config = HighlightConfig(colors=ColorTable(("#e06c75", "#98c379", "#61afef", "#c678dd")))
print(render(tokenize("alpha beta\ngamma, alpha", WordGrammar()), config))
