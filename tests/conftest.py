"""Shared fixtures: scripted fake grammars and a tiny TextMate grammar."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from hashlight.grammars import GrammarInfo
from hashlight.tokens import LineResult, TokenSpan

_WORD_OR_OTHER = re.compile(r"\w+|\s+|.")


class ScriptedGrammar:
    """Fake grammar that splits words, whitespace and punctuation.

    Words listed in ``scopes`` get those scopes (after the root scope); all
    other pieces get only the root scope. The rule stack is the number of
    lines seen so far, and every call is recorded.
    """

    def __init__(self, scopes: dict[str, tuple[str, ...]] | None = None, root: str = "source.fake") -> None:
        self.scopes = scopes or {}
        self.root = root
        self.calls: list[tuple[str, int]] = []

    @property
    def initial_state(self) -> int:
        return 0

    def tokenize_line(self, line: str, rule_stack: int) -> LineResult:
        self.calls.append((line, rule_stack))
        spans = tuple(
            TokenSpan(m.start(), m.end(), (self.root, *self.scopes.get(m.group(), ())))
            for m in _WORD_OR_OTHER.finditer(line)
        )
        return LineResult(spans, rule_stack + 1)


class FailingGrammar(ScriptedGrammar):
    """Raises on the line containing ``fail_on``."""

    def __init__(self, fail_on: str) -> None:
        super().__init__()
        self.fail_on = fail_on

    def tokenize_line(self, line: str, rule_stack: int) -> LineResult:
        if self.fail_on in line:
            raise RuntimeError(f"engine exploded on {line!r}")
        return super().tokenize_line(line, rule_stack)


class FakeResolver:
    """Resolver over an in-memory list of GrammarInfo."""

    def __init__(self, infos: list[GrammarInfo], missing_paths: set[str] | None = None) -> None:
        self.infos = infos
        self.missing_paths = missing_paths or set()
        self.lookups: list[str] = []

    def find(self, flag: str) -> GrammarInfo | None:
        self.lookups.append(flag)
        for info in self.infos:
            if flag == info.name or flag in info.aliases:
                return info
        return None

    def path_for_scope(self, scope_name: str) -> str | None:
        if scope_name in self.missing_paths:
            return None
        for info in self.infos:
            if info.scope_name == scope_name:
                return info.path
        return None


class FakeEngine:
    """Engine returning prebuilt grammars by scope."""

    def __init__(self, grammars: dict[str, ScriptedGrammar]) -> None:
        self.grammars = grammars
        self.loaded: list[str] = []

    def load_grammar(self, scope_name: str) -> ScriptedGrammar | None:
        self.loaded.append(scope_name)
        return self.grammars.get(scope_name)


FAKE_INFO = GrammarInfo(
    name="fakescript",
    aliases=("fs", "fake"),
    scope_name="source.fake",
    path="/grammars/source.fake.json",
)


@pytest.fixture
def scripted_grammar() -> ScriptedGrammar:
    """Grammar where x is a variable, shuffle a function name, let a keyword."""
    return ScriptedGrammar(
        {
            "x": ("variable.other.readwrite",),
            "shuffle": ("meta.function", "entity.name.function"),
            "let": ("storage.type",),
        }
    )


# Minimal TextMate grammar exercised through babi
DEMO_GRAMMAR = {
    "name": "Demo",
    "scopeName": "source.demo",
    "fileTypes": ["demo", ".dm"],
    "patterns": [
        {"begin": "/\\*", "end": "\\*/", "name": "comment.block.demo"},
        {"match": "\\blet\\b", "name": "storage.type.demo"},
        {"match": "\\b[0-9]+\\b", "name": "constant.numeric.demo"},
        {"match": "\\b[A-Za-z_][A-Za-z0-9_]*\\b", "name": "variable.other.readwrite.demo"},
    ],
}


@pytest.fixture
def grammar_dir(tmp_path: Path) -> Path:
    """Directory holding source.demo.json."""
    directory = tmp_path / "grammars"
    directory.mkdir()
    (directory / "source.demo.json").write_text(json.dumps(DEMO_GRAMMAR), encoding="utf-8")
    return directory
