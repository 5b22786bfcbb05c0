"""Grammar lookup by language flag and scope name.

GrammarRegistry indexes directories of TextMate grammar JSON files, one
grammar per file, named after its scope ("source.ts.json"). A short
language flag such as "ts" or "hs" resolves through the grammar's name,
the last component of its scope name, its fileTypes, or an extra alias.

Directories are scanned once, on first lookup. Earlier directories win
when two define the same scope.

Example:
    >>> registry = GrammarRegistry.default()
    >>> registry.find("python").scope_name
    'source.python'
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import cached_property

from babi.user_data import prefix_data

from hashlight.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GrammarInfo:
    """Metadata for one grammar definition file.

    Attributes:
        name: Canonical lowercase language name (e.g., "typescript")
        aliases: Other flags that select this grammar
        scope_name: Root scope (e.g., "source.ts")
        path: Path to the JSON definition

    """

    name: str
    aliases: tuple[str, ...]
    scope_name: str
    path: str


def bundled_grammar_dirs() -> tuple[str, ...]:
    """Grammar directories shipped with babi-grammars.

    babi-grammars installs its JSON files as data under
    <sys.prefix>/share/babi/grammar_v1.
    """
    return (prefix_data("grammar_v1"),)


def _read_info(scope_name: str, path: str, extra_aliases: Iterable[str]) -> GrammarInfo | None:
    try:
        with open(path, encoding="UTF-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Skipping unreadable grammar %s: %s", path, e)
        return None
    if not isinstance(raw, dict):
        logger.warning("Skipping grammar %s: expected a JSON object", path)
        return None

    name = str(raw.get("name") or scope_name).lower()
    aliases: list[str] = []
    candidates = [scope_name.rsplit(".", 1)[-1], *raw.get("fileTypes", ()), *extra_aliases]
    for alias in candidates:
        alias = str(alias).lstrip(".")
        if alias and alias != name and alias not in aliases:
            aliases.append(alias)
    return GrammarInfo(name=name, aliases=tuple(aliases), scope_name=scope_name, path=path)


class GrammarRegistry:
    """Resolves language flags and scope names to grammar files.

    Args:
        directories: Grammar directories, highest priority first
        aliases: Extra flag -> scope name mappings

    Thread Safety:
        The index is built once and never mutated afterwards. Build it
        before sharing the registry (any lookup does).

    """

    def __init__(
        self,
        directories: Iterable[str],
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        self._directories = tuple(directories)
        self._aliases = dict(aliases or {})

    @classmethod
    def default(
        cls,
        extra_dirs: Iterable[str] = (),
        aliases: Mapping[str, str] | None = None,
    ) -> GrammarRegistry:
        """Registry over extra_dirs followed by the bundled grammars."""
        return cls((*extra_dirs, *bundled_grammar_dirs()), aliases)

    @property
    def directories(self) -> tuple[str, ...]:
        return self._directories

    @cached_property
    def _scope_to_path(self) -> dict[str, str]:
        scope_to_path: dict[str, str] = {}
        for directory in self._directories:
            if not os.path.isdir(directory):
                logger.debug("Skipping missing grammar directory %s", directory)
                continue
            for filename in sorted(os.listdir(directory)):
                if not filename.endswith(".json"):
                    continue
                scope_name = filename[: -len(".json")]
                scope_to_path.setdefault(scope_name, os.path.join(directory, filename))
        logger.debug("Indexed %d grammars from %d directories", len(scope_to_path), len(self._directories))
        return scope_to_path

    @cached_property
    def _infos(self) -> tuple[GrammarInfo, ...]:
        extra: dict[str, list[str]] = {}
        for flag, scope_name in self._aliases.items():
            extra.setdefault(scope_name, []).append(flag)
        infos = (
            _read_info(scope_name, path, extra.get(scope_name, ()))
            for scope_name, path in self._scope_to_path.items()
        )
        return tuple(info for info in infos if info is not None)

    def find(self, flag: str) -> GrammarInfo | None:
        """Look up grammar metadata by name or alias.

        Names are checked before aliases, so a grammar called "c" wins over
        another grammar listing "c" as a file type.
        """
        for info in self._infos:
            if flag == info.name:
                return info
        for info in self._infos:
            if flag in info.aliases:
                return info
        return None

    def path_for_scope(self, scope_name: str) -> str | None:
        """Definition path for a scope, or None if no directory has it."""
        return self._scope_to_path.get(scope_name)

    def languages(self) -> list[GrammarInfo]:
        """All known grammars, sorted by name."""
        return sorted(self._infos, key=lambda info: (info.name, info.scope_name))
