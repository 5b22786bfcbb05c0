"""Tests for the color table and name-like classification."""

from __future__ import annotations

import pytest

from hashlight.colors import (
    DEFAULT_COLOR_TABLE,
    DEFAULT_COLORS,
    NAME_SCOPE_PREFIXES,
    ColorTable,
    is_name_like,
)
from hashlight.errors import ConfigError
from hashlight.tokens import Token


class TestColorTable:
    """ColorTable behavior."""

    def test_default_has_sixty_colors(self) -> None:
        assert len(DEFAULT_COLOR_TABLE) == 60
        assert DEFAULT_COLOR_TABLE.colors == DEFAULT_COLORS
        assert DEFAULT_COLOR_TABLE[0] == "#d78797"
        assert DEFAULT_COLOR_TABLE[59] == "#b57084"

    def test_colors_are_unique(self) -> None:
        assert len(set(DEFAULT_COLORS)) == len(DEFAULT_COLORS)

    def test_known_color(self) -> None:
        # crc8("x") == 0x6F == 111, 111 % 60 == 51
        assert DEFAULT_COLOR_TABLE.index_for("x") == 51
        assert DEFAULT_COLOR_TABLE.color_for("x") == "#c689c8"

    def test_color_is_deterministic(self) -> None:
        assert DEFAULT_COLOR_TABLE.color_for("currentIndex") == DEFAULT_COLOR_TABLE.color_for("currentIndex")

    def test_index_in_range(self) -> None:
        for text in ["", "a", "array", "temporaryValue", "ünïcödé", "x" * 1000]:
            assert 0 <= DEFAULT_COLOR_TABLE.index_for(text) < 60

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_COLOR_TABLE.colors = ()  # type: ignore[misc]

    def test_from_iterable(self) -> None:
        table = ColorTable.from_iterable(["#000000", "#FFFFFF"])
        assert table.colors == ("#000000", "#FFFFFF")

    def test_empty_rejected(self) -> None:
        with pytest.raises(ConfigError, match="at least one"):
            ColorTable(())

    @pytest.mark.parametrize("bad", ["red", "#fff", "#12345g", "000000"])
    def test_malformed_rejected(self, bad: str) -> None:
        with pytest.raises(ConfigError, match="Invalid color"):
            ColorTable(("#000000", bad))


class TestIsNameLike:
    """Prefix classification on scopes."""

    def test_default_prefixes(self) -> None:
        assert NAME_SCOPE_PREFIXES == ("entity.name", "variable")

    @pytest.mark.parametrize(
        "scopes",
        [
            ("variable.other.readwrite",),
            ("source.ts", "entity.name.function.ts"),
            ("variableX",),
            ("entity.namespace",),
            ("variable",),
        ],
    )
    def test_name_like(self, scopes: tuple[str, ...]) -> None:
        assert is_name_like(Token("t", scopes))

    @pytest.mark.parametrize(
        "scopes",
        [
            (),
            ("source.ts",),
            ("meta.variable",),
            ("entity.other.attribute-name",),
            ("support.variable",),
        ],
    )
    def test_not_name_like(self, scopes: tuple[str, ...]) -> None:
        assert not is_name_like(Token("t", scopes))

    def test_custom_prefixes(self) -> None:
        token = Token("print", ("support.function.builtin",))
        assert is_name_like(token, ("support.function",))
        assert not is_name_like(token)
