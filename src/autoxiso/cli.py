"""Typer-based command line interface for auto-xiso-extractor."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import typer
from pydantic import ValidationError

from autoxiso.session import SessionController
from autoxiso.utils.config import DEFAULT_CONFIG_PATH, AppConfig, load_config
from autoxiso.utils.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)

app = typer.Typer(add_completion=False)


def _apply_overrides(config: AppConfig, overrides: Dict[str, Optional[Path]]) -> AppConfig:
    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return config
    return AppConfig(**{**config.model_dump(), **update})


@app.command()
def main(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="YAML configuration file."),
    input_dir: Optional[Path] = typer.Option(None, "--input", help="Directory scanned for disc images."),
    output_dir: Optional[Path] = typer.Option(None, "--output", help="Directory extract-xiso writes into."),
    extractor: Optional[Path] = typer.Option(None, "--extractor", help="Path to the extract-xiso executable."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    configure_logging("DEBUG" if verbose else "WARNING")
    try:
        config = _apply_overrides(
            load_config(config_path),
            {"input_dir": input_dir, "output_dir": output_dir, "extractor_path": extractor},
        )
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid configuration in {config_path}: {exc}") from exc

    LOGGER.debug("Starting session with %s", config)
    try:
        SessionController(config).begin()
    except (EOFError, KeyboardInterrupt):
        typer.echo("\nInput closed, leaving AutoXiso.", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
