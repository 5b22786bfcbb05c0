"""Tests for hashlight utility modules."""


class TestCrc8:
    """Tests for crc8."""

    def test_check_value(self) -> None:
        from hashlight.utils.hashing import crc8

        # Standard check value for CRC-8 with polynomial 0x07
        assert crc8(b"123456789") == 0xF4

    def test_empty(self) -> None:
        from hashlight.utils.hashing import crc8

        assert crc8("") == 0
        assert crc8(b"") == 0

    def test_single_byte(self) -> None:
        from hashlight.utils.hashing import crc8

        assert crc8("x") == 0x6F

    def test_str_hashed_as_utf8(self) -> None:
        from hashlight.utils.hashing import crc8

        assert crc8("héllo") == crc8("héllo".encode("utf-8"))

    def test_chaining(self) -> None:
        from hashlight.utils.hashing import crc8

        assert crc8(b"56789", initial=crc8(b"1234")) == crc8(b"123456789")

    def test_range(self) -> None:
        from hashlight.utils.hashing import crc8

        for i in range(512):
            assert 0 <= crc8(str(i)) <= 255


class TestEscapeHtml:
    """Tests for escape_html."""

    def test_escapes_specials(self) -> None:
        from hashlight.utils.text import escape_html

        assert escape_html("<a href=\"x\">'&'</a>") == (
            "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;"
        )

    def test_empty(self) -> None:
        from hashlight.utils.text import escape_html

        assert escape_html("") == ""


class TestLogger:
    """Tests for get_logger."""

    def test_prefix_added(self) -> None:
        from hashlight.utils.logger import get_logger

        assert get_logger("mymodule").name == "hashlight.mymodule"

    def test_prefix_not_duplicated(self) -> None:
        from hashlight.utils.logger import get_logger

        assert get_logger("hashlight.renderer").name == "hashlight.renderer"
        assert get_logger("hashlight").name == "hashlight"
