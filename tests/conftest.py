"""Shared fixtures: a stub styler and an isolated default render context."""
from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

SRC_DIR = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_DIR))

from failreport_kit.data.types import RenderContext, reset_render_context  # noqa: E402
from failreport_kit.styles import Styler  # noqa: E402

RIGHT = "right>"


@pytest.fixture
def styler() -> MagicMock:
    """Styler stub: indentation is a marker, colors return blanks until a test sets them."""
    fake = MagicMock(spec=Styler)
    fake.move_right.return_value = RIGHT
    for name in ("suite", "suite_root", "failure", "browser", "error_summary", "muted", "highlight"):
        getattr(fake, name).return_value = " "
    return fake


@pytest.fixture(autouse=True)
def render_context(styler: MagicMock) -> RenderContext:
    """Install a fresh default context around the stub styler for every test."""
    ctx = reset_render_context(RenderContext(styler=styler))
    yield ctx
    reset_render_context()
