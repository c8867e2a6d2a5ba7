"""Interactive main menu loop."""
from __future__ import annotations

from typing import Callable, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from autoxiso.catalog.scanner import CatalogScanner
from autoxiso.errors import AutoXisoError, InvalidUserInputError
from autoxiso.extract.extractor import XisoExtractor
from autoxiso.utils.config import AppConfig
from autoxiso.utils.logging import get_logger

from .actions import detect_roms, exit_session
from .menu import MENU_ACTIONS, MenuAction
from .prompts import normalise_selection, parse_confirmation
from .state import SessionState


LOGGER = get_logger(__name__)

BANNER = (
    "#===========================#",
    "#    Auto Xiso Extractor    #",
    "#===========================#",
)
INVALID_OPTION = "Invalid option. Please try again."

Reader = Callable[[str], str]


class SessionController:
    """Render the menu, read a selection and dispatch it until Exit."""

    def __init__(
        self,
        config: AppConfig,
        console: Optional[Console] = None,
        reader: Optional[Reader] = None,
        scanner: Optional[CatalogScanner] = None,
        extractor: Optional[XisoExtractor] = None,
        actions: Sequence[MenuAction] = MENU_ACTIONS,
    ) -> None:
        self.config = config
        self.console = console or Console(highlight=False)
        self._reader = reader or self._console_input
        self.scanner = scanner or CatalogScanner()
        self._extractor = extractor
        self.actions = tuple(actions)
        self.state = SessionState()

    @property
    def extractor(self) -> XisoExtractor:
        if self._extractor is None:
            self._extractor = XisoExtractor(self.config.extractor_path, self.config.output_dir)
        return self._extractor

    def _console_input(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False)

    def ask(self, prompt: str) -> str:
        return self._reader(prompt)

    def confirm(self) -> bool:
        while True:
            try:
                return parse_confirmation(self.ask("Is this correct? (Y/N): "))
            except InvalidUserInputError as exc:
                LOGGER.debug("Rejected confirmation: %s", exc)
                self.console.print("Please enter a valid response.")

    def report_error(self, exc: AutoXisoError) -> None:
        LOGGER.debug("%s: %s", type(exc).__name__, exc)
        self.console.print(escape(str(exc)), style="red")

    def visible_actions(self) -> list[MenuAction]:
        return [action for action in self.actions if not action.requires_catalog or self.state.catalog_ready]

    def find_action(self, raw: str) -> Optional[MenuAction]:
        selection = normalise_selection(raw)
        return next((action for action in self.actions if action.matches(selection)), None)

    def render_header(self) -> None:
        for line in BANNER:
            self.console.print(line)
        self.console.print()
        if self.state.catalog:
            self.console.print(f"Detected ROMs: {len(self.state.catalog)}\n")
        if self.state.message:
            self.console.print(f"{escape(self.state.message)}\n")

    def render_menu(self) -> None:
        self.console.print("===| MAIN MENU |===")
        for action in self.visible_actions():
            self.console.print(escape(action.label()))
        self.console.print("\nEnter bracketed text to make a selection.")

    def check_paths(self) -> None:
        if self.config.input_dir is None:
            self.console.print("Input path is empty!")
            exit_session(self)
        if self.config.output_dir is None:
            self.console.print("Output path is empty!")
            exit_session(self)

    def begin(self) -> None:
        """Validate paths, run the initial detection and loop forever."""

        self.check_paths()
        detect_roms(self)
        self.console.clear()
        while True:
            self.step()

    def step(self) -> None:
        """Run one render, select and execute cycle."""

        self.render_header()
        self.render_menu()
        raw = self.ask("Select an option: ")
        action = self.find_action(raw)
        if action is None:
            LOGGER.debug("Unknown menu selection %r", raw)
            self.state.message = INVALID_OPTION
        else:
            self.execute(action)
        self.console.clear()

    def execute(self, action: MenuAction) -> None:
        LOGGER.debug("Running menu action %s", action.action_id.value)
        self.state.message = ""
        self.console.clear()
        self.render_header()
        action.handler(self)
        self.ask("\nPress Enter to continue...")
