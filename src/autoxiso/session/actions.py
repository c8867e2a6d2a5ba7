"""Handlers behind the main menu entries.

Each handler takes the running :class:`SessionController`, prints its own
output and returns control to the menu loop. Recoverable errors are reported
here and never escape a handler; only :func:`exit_session` leaves the loop.
"""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.markup import escape

from autoxiso.catalog.scanner import ScanConfig
from autoxiso.catalog.schema import CatalogEntry
from autoxiso.errors import AutoXisoError, InvalidUserInputError, PathMissingError, RenameConflictError
from autoxiso.extract.folders import list_output_folders, strip_folder_extension
from autoxiso.utils.logging import get_logger
from autoxiso.utils.paths import normalise_path

from .prompts import is_back, parse_index

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .controller import SessionController


LOGGER = get_logger(__name__)
NO_ROMS = "No ROMs detected!"
BACK_TO_MENU = "Returning to Main Menu..."


def detect_roms(session: "SessionController") -> None:
    console = session.console
    console.print("===| DETECT ROMS |===")
    session.state.clear_catalog()

    root = session.config.input_dir
    existed = root.exists()
    if not existed:
        console.print("Input directory does not exist!")

    try:
        entries = session.scanner.scan(ScanConfig(root=root, extensions=session.config.extensions))
    except PathMissingError as exc:
        session.report_error(exc)
        return

    if not existed:
        console.print(f"Input directory has been created:\n{escape(str(normalise_path(root)))}")
    if not entries:
        console.print(NO_ROMS)
        return

    session.state.replace_catalog(entries)
    console.print(f"\nDetected {len(session.state.catalog)} ROMs")


def list_roms(session: "SessionController") -> None:
    console = session.console
    console.print("===| LIST ROMS |===")
    for index, entry in enumerate(session.state.catalog):
        console.print(escape(f"[{index}] - {entry.display_name}"))
    console.print(f"\nListed {len(session.state.catalog)} ROMs")


def extract_one(session: "SessionController") -> None:
    console = session.console
    catalog = session.state.catalog
    if not catalog:
        console.print(NO_ROMS)
        return

    list_roms(session)
    console.print("\n===| EXTRACT SINGLE ROM |===")
    console.print("Use the bracketed number. Type 'Back' to return.")

    while True:
        raw = session.ask("Which ROM would you like to extract: ")
        if is_back(raw):
            console.print(BACK_TO_MENU)
            return
        try:
            index = parse_index(raw, len(catalog))
        except InvalidUserInputError as exc:
            LOGGER.debug("Rejected ROM index: %s", exc)
            console.print("Please enter a valid ROM index!")
            continue

        entry = catalog[index]
        console.print(f"\nChosen ROM: {escape(entry.display_name)}")
        if session.confirm():
            extract_entry(session, entry)
            return
        console.print("Returning to ROM selection...")


def extract_all(session: "SessionController") -> None:
    console = session.console
    catalog = session.state.catalog
    if not catalog:
        console.print(NO_ROMS)
        return

    console.print("\n===| EXTRACT ALL ROMS |===")
    console.print(f"This will extract {len(catalog)} ROMs")
    if not session.confirm():
        console.print(BACK_TO_MENU)
        return

    succeeded = sum(1 for entry in catalog if extract_entry(session, entry))
    console.print(f"\nExtracted {succeeded} of {len(catalog)} ROMs")


def extract_entry(session: "SessionController", entry: CatalogEntry) -> bool:
    """Run the extractor for one entry and report the outcome."""

    console = session.console
    extractor = session.extractor
    console.print(f"\nExtracting: {escape(entry.display_name)}")
    console.print(f"Destination: {escape(str(extractor.output_dir))}")
    try:
        extractor.extract(entry)
    except AutoXisoError as exc:
        session.report_error(exc)
        return False
    console.print("\tComplete!")
    return True


def clear_extensions(session: "SessionController") -> None:
    console = session.console
    try:
        folders = list_output_folders(session.config.output_dir)
    except PathMissingError as exc:
        session.report_error(exc)
        return

    console.print("\n===| CLEAR OUTPUT FOLDER EXTENSIONS |===")
    console.print("This will remove any extension from the output subdirectories.")
    if not session.confirm():
        console.print(BACK_TO_MENU)
        return

    changes = 0
    for folder in folders:
        try:
            target = strip_folder_extension(folder)
        except RenameConflictError as exc:
            session.report_error(exc)
            continue
        if target is None:
            continue
        changes += 1
        console.print(escape(f"Folder renamed from '{folder}' to '{target}'"))
    console.print(f"{changes} changes made.")


def exit_session(session: "SessionController") -> None:
    session.console.print("\nExiting AutoXiso...")
    sys.exit(0)
