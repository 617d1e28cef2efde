"""Tests for the ANSI and plain stylers."""
from __future__ import annotations

from failreport_kit.styles import AnsiStyler, PlainStyler


class TestAnsiStyler:
    def test_move_right_is_cursor_forward(self) -> None:
        assert AnsiStyler().move_right(4) == "\x1b[4C"

    def test_styles_wrap_text_in_escapes(self) -> None:
        styler = AnsiStyler()
        for fn in (styler.suite, styler.suite_root, styler.failure, styler.browser,
                   styler.error_summary, styler.muted, styler.highlight):
            out = fn("name")
            assert "name" in out
            assert out.startswith("\x1b[")
            assert out.endswith("\x1b[0m")

    def test_root_suite_is_underlined(self) -> None:
        assert "4" in AnsiStyler().suite_root("x").split("m", 1)[0]


class TestPlainStyler:
    def test_identity_styles(self) -> None:
        styler = PlainStyler()
        assert styler.failure("x") == "x"
        assert styler.highlight("y") == "y"

    def test_move_right_is_spaces(self) -> None:
        assert PlainStyler().move_right(7) == " " * 7
