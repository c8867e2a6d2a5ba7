"""Parsers for the answers typed at menu sub-prompts."""
from __future__ import annotations

from autoxiso.errors import InvalidUserInputError

BACK_COMMAND = "back"


def normalise_selection(raw: str) -> str:
    """Trim, lowercase and drop any square brackets typed around a menu name."""

    return raw.strip().lower().replace("[", "").replace("]", "")


def is_back(raw: str) -> bool:
    return raw.strip().lower() == BACK_COMMAND


def parse_index(raw: str, count: int) -> int:
    """Return ``raw`` as a catalog index in ``range(count)``."""

    try:
        index = int(raw.strip())
    except ValueError as exc:
        raise InvalidUserInputError(f"{raw!r} is not a number") from exc
    if not 0 <= index < count:
        raise InvalidUserInputError(f"{index} is outside 0..{count - 1}")
    return index


def parse_confirmation(raw: str) -> bool:
    """Map ``y``/``n`` (any case) to ``True``/``False``."""

    answer = raw.strip().lower()
    if answer == "y":
        return True
    if answer == "n":
        return False
    raise InvalidUserInputError(f"{raw!r} is not Y or N")
