"""Keyboard focus over the enabled options of an ordered list."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional, Tuple

from overlay_engine.options import MenuOption, OptionLike, coerce_options, enabled_subset

LoggerFn = Callable[..., None]


def _noop_log(message: str, *args: object) -> None:
    return None


class FocusDirection(str, Enum):
    FIRST = "first"
    LAST = "last"
    UP = "up"
    DOWN = "down"


class FocusNavigator:
    """Holds the option list and the currently focused option.

    Focus is compared by option id. ``move_focus`` only ever lands on enabled
    options and wraps around in both directions; ``set_focus`` is unconditional
    and is meant for pointer hover over options the caller knows are enabled.
    """

    def __init__(self, options: Iterable[OptionLike] = (), *, logger: Optional[LoggerFn] = None) -> None:
        self._log = logger or _noop_log
        self._options: Tuple[MenuOption, ...] = ()
        self._enabled: Tuple[MenuOption, ...] = ()
        self._focused: Optional[MenuOption] = None
        self.set_options(options)

    @property
    def options(self) -> Tuple[MenuOption, ...]:
        return self._options

    @property
    def enabled_options(self) -> Tuple[MenuOption, ...]:
        return self._enabled

    @property
    def focused(self) -> Optional[MenuOption]:
        return self._focused

    def set_options(self, options: Iterable[OptionLike]) -> None:
        """Replace the option list, re-binding or dropping focus by id."""
        self._options = coerce_options(options)
        self._enabled = enabled_subset(self._options)
        current = self._focused
        if current is None:
            return
        replacement = self._find_enabled(current.id)
        if replacement is None:
            self._log("Dropping focus from option %r; no longer enabled", current.id)
        self._focused = replacement

    def set_focus(self, option: Optional[MenuOption]) -> None:
        self._focused = option

    def clear_focus(self) -> None:
        self._focused = None

    @staticmethod
    def is_disabled(option: Optional[MenuOption]) -> bool:
        if option is None:
            return False
        return bool(option.disabled)

    def move_focus(self, direction: FocusDirection | str = FocusDirection.FIRST) -> Optional[MenuOption]:
        """Move focus and return the newly focused option (unchanged on an empty enabled list)."""
        enabled = self._enabled
        if not enabled:
            self._log("Focus move %s ignored; no enabled options", direction)
            return self._focused
        index = self._focused_index()
        count = len(enabled)
        if direction == FocusDirection.UP:
            target = enabled[index - 1] if index > 0 else enabled[count - 1]
        elif direction == FocusDirection.DOWN:
            target = enabled[(index + 1) % count]
        elif direction == FocusDirection.LAST:
            target = enabled[count - 1]
        else:
            target = enabled[0]
        self._focused = target
        self._log("Focus moved %s to option %r", getattr(direction, "value", direction), target.id)
        return target

    def _focused_index(self) -> int:
        current = self._focused
        if current is None:
            return -1
        for index, option in enumerate(self._enabled):
            if option.id == current.id:
                return index
        return -1

    def _find_enabled(self, identifier: object) -> Optional[MenuOption]:
        for option in self._enabled:
            if option.id == identifier:
                return option
        return None
