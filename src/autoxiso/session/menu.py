"""Static table of main menu entries."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Tuple

from . import actions

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .controller import SessionController


class ActionId(str, Enum):
    DETECT = "detect"
    LIST = "list"
    EXTRACT_ONE = "extract_one"
    EXTRACT_ALL = "extract_all"
    CLEAR_EXT = "clear_ext"
    EXIT = "exit"


@dataclass(frozen=True, slots=True)
class MenuAction:
    """A selectable menu entry bound to its handler."""

    action_id: ActionId
    name: str
    description: str
    requires_catalog: bool
    handler: Callable[["SessionController"], None]

    def matches(self, selection: str) -> bool:
        """``selection`` must already be normalised (trimmed, lowercase, no brackets)."""

        return self.name.lower() == selection

    def label(self) -> str:
        if self.description:
            return f"[{self.name}] - {self.description}"
        return f"[{self.name}]"


MENU_ACTIONS: Tuple[MenuAction, ...] = (
    MenuAction(ActionId.DETECT, "Detect", "Detects ROMs", False, actions.detect_roms),
    MenuAction(ActionId.LIST, "List", "Lists detected ROMs", True, actions.list_roms),
    MenuAction(ActionId.EXTRACT_ONE, "Extract One", "Extracts a single ROM", True, actions.extract_one),
    MenuAction(ActionId.EXTRACT_ALL, "Extract All", "Extracts all detected ROMs", True, actions.extract_all),
    MenuAction(
        ActionId.CLEAR_EXT,
        "Clear Ext",
        "Removes any extension on output folders",
        False,
        actions.clear_extensions,
    ),
    MenuAction(ActionId.EXIT, "Exit", "", False, actions.exit_session),
)
