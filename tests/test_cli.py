from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
from typer.testing import CliRunner

from autoxiso import cli

from conftest import make_roms

runner = CliRunner()


@pytest.fixture
def levels(monkeypatch: pytest.MonkeyPatch) -> List[str]:
    recorded: List[str] = []
    monkeypatch.setattr(cli, "configure_logging", recorded.append)
    return recorded


def _args(tmp_path: Path) -> List[str]:
    return [
        "--config",
        str(tmp_path / "missing.yml"),
        "--input",
        str(tmp_path / "input"),
        "--output",
        str(tmp_path / "output"),
        "--extractor",
        str(tmp_path / "extract-xiso"),
    ]


def test_exit_action_ends_with_status_zero(tmp_path: Path, levels: List[str]) -> None:
    make_roms(tmp_path / "input", "Halo.iso")
    result = runner.invoke(cli.app, _args(tmp_path), input="list\n\nexit\n")
    assert result.exit_code == 0
    assert "Halo" in result.output
    assert "Exiting AutoXiso..." in result.output
    assert levels == ["WARNING"]


def test_verbose_enables_debug_logging(tmp_path: Path, levels: List[str]) -> None:
    result = runner.invoke(cli.app, [*_args(tmp_path), "--verbose"], input="exit\n")
    assert result.exit_code == 0
    assert levels == ["DEBUG"]


def test_closed_input_ends_with_status_one(tmp_path: Path, levels: List[str]) -> None:
    result = runner.invoke(cli.app, _args(tmp_path), input="")
    assert result.exit_code == 1


def test_blank_config_path_exits_cleanly(tmp_path: Path, levels: List[str]) -> None:
    config_path = tmp_path / "autoxiso.yml"
    config_path.write_text("input_dir: ''\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["--config", str(config_path)], input="")
    assert result.exit_code == 0
    assert "Input path is empty!" in result.output
