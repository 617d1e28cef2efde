"""Tests for the failreport command line."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from failreport_kit.cli import app

runner = CliRunner()


@pytest.fixture
def results(tmp_path: Path) -> Path:
    path = tmp_path / "results.json"
    path.write_text(json.dumps({"failures": [{
        "suite": ["Cart"],
        "test": "adds item",
        "browser": "Chrome 120",
        "errors": ["TypeError: x is undefined",
                   "at node_modules/react/index.js:3",
                   "at src/cart.js?deadbeef:12:4 "],
    }]}))
    return path


class TestRenderCommand:
    def test_plain_report(self, results: Path) -> None:
        result = runner.invoke(app, ["render", str(results), "--no-color"])
        assert result.exit_code == 1
        assert "Cart" in result.output
        assert "1) TypeError: x is undefined" in result.output
        assert "src/cart.js:12:4" in result.output
        assert "\x1b[" not in result.output

    def test_omit_external(self, results: Path) -> None:
        result = runner.invoke(app, ["render", str(results), "--no-color", "--omit-external"])
        assert "node_modules" not in result.output

    def test_standalone(self, results: Path) -> None:
        result = runner.invoke(app, ["render", str(results), "--no-color", "--standalone"])
        assert result.output.startswith("Cart\n")
        assert "Failed Tests" not in result.output

    def test_color_output(self, results: Path) -> None:
        result = runner.invoke(app, ["render", str(results)])
        assert "\x1b[" in result.output

    def test_config_file(self, results: Path, tmp_path: Path) -> None:
        cfg = tmp_path / "report.yaml"
        cfg.write_text("color: false\nroot_name: Broken\n")
        result = runner.invoke(app, ["render", str(results), "-c", str(cfg)])
        assert result.output.startswith(" Broken\n")

    def test_no_failures_exit_zero(self, tmp_path: Path) -> None:
        path = tmp_path / "ok.json"
        path.write_text(json.dumps({"failures": []}))
        assert runner.invoke(app, ["render", str(path)]).exit_code == 0

    def test_bad_results_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", str(tmp_path / "missing.json")])
        assert result.exit_code == 2

    def test_undecodable_results_file(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"failures:\n  - test: \xff\xfe\n")
        result = runner.invoke(app, ["render", str(path)])
        assert result.exit_code == 2
