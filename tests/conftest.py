from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest
from rich.console import Console

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from autoxiso.catalog.schema import CatalogEntry  # noqa: E402
from autoxiso.errors import ProcessLaunchError  # noqa: E402
from autoxiso.session import SessionController  # noqa: E402
from autoxiso.utils.config import AppConfig  # noqa: E402


class ScriptedReader:
    """Feed canned answers to the session prompts."""

    def __init__(self, answers: Sequence[str]) -> None:
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError(prompt)
        return self.answers.pop(0)


class RecordingExtractor:
    """Stand-in for the extract-xiso process that records what it was asked to do."""

    def __init__(self, output_dir: Path, failing: Sequence[str] = ()) -> None:
        self.output_dir = output_dir
        self.failing = set(failing)
        self.extracted: List[str] = []

    def extract(self, entry: CatalogEntry) -> int:
        if entry.display_name in self.failing:
            raise ProcessLaunchError(f"Unable to run extract-xiso for {entry.display_name}")
        self.extracted.append(entry.display_name)
        return 0


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        input_dir=tmp_path / "input",
        output_dir=tmp_path / "output",
        extractor_path=tmp_path / "dependents" / "extract-xiso",
    )


@pytest.fixture
def make_controller(app_config: AppConfig, console: Console) -> Callable[..., SessionController]:
    def _make(
        answers: Sequence[str] = (),
        extractor: Optional[RecordingExtractor] = None,
        config: Optional[AppConfig] = None,
    ) -> SessionController:
        cfg = config or app_config
        controller = SessionController(
            cfg,
            console=console,
            reader=ScriptedReader(answers),
            extractor=extractor or RecordingExtractor(cfg.output_dir),
        )
        return controller

    return _make


def output_of(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


def make_roms(directory: Path, *names: str) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_bytes(b"\x00" * 16)
