from __future__ import annotations

from enum import Enum
from typing import Optional


class MenuKey(str, Enum):
    """Key identifiers understood by the menu controller (DOM ``KeyboardEvent.key`` values)."""

    ENTER = "Enter"
    SPACE = " "
    ARROW_DOWN = "ArrowDown"
    ARROW_UP = "ArrowUp"
    ESCAPE = "Escape"
    TAB = "Tab"
    HOME = "Home"
    END = "End"

    @classmethod
    def parse(cls, value: object) -> Optional["MenuKey"]:
        if isinstance(value, MenuKey):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
