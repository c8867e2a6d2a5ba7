"""Process boundary around the external extract-xiso executable."""
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from autoxiso.catalog.schema import CatalogEntry
from autoxiso.errors import ExecutableMissingError, ProcessLaunchError
from autoxiso.utils.logging import get_logger
from autoxiso.utils.paths import ensure_directory, normalise_path


LOGGER = get_logger(__name__)


class XisoExtractor:
    """Unpack disc images into ``output_dir`` by running ``executable``.

    The child inherits the console and is awaited without a timeout. Its
    exit status is logged but never treated as a failure.
    """

    def __init__(self, executable: Optional[Path], output_dir: Path) -> None:
        self.executable = Path(executable) if executable is not None else None
        self.output_dir = Path(output_dir)

    def command(self, entry: CatalogEntry) -> List[str]:
        if self.executable is None:
            raise ExecutableMissingError("No extract-xiso path is configured")
        # The child runs inside output_dir, so both paths must be absolute.
        return [str(normalise_path(self.executable)), str(normalise_path(entry.source_path))]

    def extract(self, entry: CatalogEntry) -> int:
        if self.executable is None or not self.executable.is_file():
            raise ExecutableMissingError(
                f"extract-xiso is missing! Expected here: {self.executable}"
            )
        ensure_directory(self.output_dir)

        command = self.command(entry)
        LOGGER.debug("Launching %s in %s", command, self.output_dir)
        try:
            completed = subprocess.run(command, cwd=self.output_dir, check=False)
        except OSError as exc:
            raise ProcessLaunchError(f"Unable to run {command[0]}: {exc}") from exc
        LOGGER.debug("%s exited with status %s", entry.display_name, completed.returncode)
        return completed.returncode
