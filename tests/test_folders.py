from __future__ import annotations

from pathlib import Path

import pytest

from autoxiso.errors import PathMissingError, RenameConflictError
from autoxiso.extract import list_output_folders, strip_folder_extension, stripped_name


def test_stripped_name_truncates_at_first_dot() -> None:
    assert stripped_name("Game.iso") == "Game"
    assert stripped_name("Game.part1.iso") == "Game"
    assert stripped_name("Plain") is None


def test_folder_with_extension_is_renamed(tmp_path: Path) -> None:
    folder = tmp_path / "Game.iso"
    folder.mkdir()
    (folder / "default.xbe").write_bytes(b"")

    target = strip_folder_extension(folder)

    assert target == tmp_path / "Game"
    assert (tmp_path / "Game" / "default.xbe").exists()
    assert not folder.exists()


def test_folder_without_dot_is_left_alone(tmp_path: Path) -> None:
    folder = tmp_path / "Plain"
    folder.mkdir()
    assert strip_folder_extension(folder) is None
    assert folder.is_dir()


def test_existing_target_is_a_conflict(tmp_path: Path) -> None:
    (tmp_path / "Dup").mkdir()
    (tmp_path / "Dup.iso").mkdir()
    with pytest.raises(RenameConflictError, match="already exists"):
        strip_folder_extension(tmp_path / "Dup.iso")
    assert (tmp_path / "Dup.iso").is_dir()


def test_dot_only_prefix_cannot_be_renamed(tmp_path: Path) -> None:
    (tmp_path / ".hidden").mkdir()
    with pytest.raises(RenameConflictError):
        strip_folder_extension(tmp_path / ".hidden")


def test_list_output_folders_creates_directory_and_skips_files(tmp_path: Path) -> None:
    output_dir = tmp_path / "output"
    assert list_output_folders(output_dir) == []
    (output_dir / "b.iso").mkdir()
    (output_dir / "a").mkdir()
    (output_dir / "notes.txt").write_text("x")
    assert list_output_folders(output_dir) == [output_dir / "a", output_dir / "b.iso"]


def test_list_output_folders_reports_uncreatable_directory(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file")
    with pytest.raises(PathMissingError):
        list_output_folders(blocker / "output")
