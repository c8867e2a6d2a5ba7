"""Menu-driven session: state, action table and the dispatch loop."""

from .controller import SessionController
from .menu import MENU_ACTIONS, ActionId, MenuAction
from .state import SessionState

__all__ = [
    "ActionId",
    "MENU_ACTIONS",
    "MenuAction",
    "SessionController",
    "SessionState",
]
