"""Open/closed state machine and key dispatch for action menus."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from overlay_engine.close_policy import ALWAYS, CloseOnSelect
from overlay_engine.focus_navigator import FocusDirection, FocusNavigator
from overlay_engine.keys import MenuKey
from overlay_engine.options import MenuOption, OptionLike

_LOGGER = logging.getLogger("OverlayEngine.Menu")

LoggerFn = Callable[..., None]
StateListener = Callable[["MenuState"], None]

_FOCUS_KEYS = {
    MenuKey.ARROW_UP: FocusDirection.UP,
    MenuKey.ARROW_DOWN: FocusDirection.DOWN,
    MenuKey.HOME: FocusDirection.FIRST,
    MenuKey.END: FocusDirection.LAST,
}


@dataclass(frozen=True)
class MenuState:
    """Snapshot handed to renderers after every mutation."""

    is_open: bool
    focused: Optional[MenuOption] = None


class MenuController:
    """Owns the open/closed state and focus of a single menu.

    Transitions are level-triggered: ``toggle`` fires the open or close
    callback on every call, whether or not the state changed. Callbacks run
    synchronously; a callback that calls back into the controller re-enters it
    without any guard.
    """

    def __init__(
        self,
        options: Iterable[OptionLike] = (),
        *,
        is_open: bool = False,
        close_on_select: object = ALWAYS,
        on_open: Optional[Callable[[], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
        on_option_select: Optional[Callable[[MenuOption], None]] = None,
        on_option_hover: Optional[Callable[[MenuOption], None]] = None,
        logger: Optional[LoggerFn] = None,
    ) -> None:
        self._log = logger or _LOGGER.debug
        self._navigator = FocusNavigator(options, logger=self._log)
        self._is_open = bool(is_open)
        self._close_on_select = CloseOnSelect.coerce(close_on_select)
        self._on_open = on_open
        self._on_close = on_close
        self._on_option_select = on_option_select
        self._on_option_hover = on_option_hover
        self._listeners: List[StateListener] = []

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def focused_option(self) -> Optional[MenuOption]:
        return self._navigator.focused

    @property
    def navigator(self) -> FocusNavigator:
        return self._navigator

    @property
    def close_on_select(self) -> CloseOnSelect:
        return self._close_on_select

    @property
    def state(self) -> MenuState:
        return MenuState(is_open=self._is_open, focused=self._navigator.focused)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return _unsubscribe

    def set_options(self, options: Iterable[OptionLike]) -> None:
        self._navigator.set_options(options)
        self._notify()

    def toggle(self, open_: bool) -> None:
        self._is_open = bool(open_)
        self._log("Menu toggled open=%s", self._is_open)
        self._notify()
        if not open_:
            if self._on_close is not None:
                self._on_close()
        elif self._on_open is not None:
            self._on_open()

    def click_trigger(self) -> None:
        self.toggle(not self._is_open)

    def dismiss(self) -> None:
        self.toggle(False)

    def select_option(self, option: MenuOption) -> None:
        if self._on_option_select is not None:
            self._on_option_select(option)
        if self._close_on_select.should_close(option):
            self.toggle(False)

    def hover_option(self, option: MenuOption) -> None:
        if self._navigator.is_disabled(option):
            self._log("Ignoring hover on disabled option %r", option.id)
            return
        self._navigator.set_focus(option)
        self._notify()
        if self._on_option_hover is not None:
            self._on_option_hover(option)

    def move_focus(self, direction: FocusDirection | str = FocusDirection.FIRST) -> Optional[MenuOption]:
        focused = self._navigator.move_focus(direction)
        self._notify()
        return focused

    def handle_key(self, key: object) -> bool:
        """Dispatch a key identifier; returns True when the key was consumed."""
        menu_key = MenuKey.parse(key)
        if menu_key is None:
            self._log("Ignoring key %r", key)
            return False
        was_open = self._is_open
        focused = self._navigator.focused

        direction = _FOCUS_KEYS.get(menu_key)
        if direction is not None:
            self.move_focus(direction)
            return True
        if menu_key is MenuKey.ENTER:
            if focused is not None:
                self.select_option(focused)
            if (focused is None and was_open) or not was_open:
                self.toggle(not was_open)
            return True
        if menu_key is MenuKey.SPACE:
            if not was_open:
                self.toggle(True)
            return False
        # Escape and Tab pass the current value, which re-fires the open callback.
        if was_open:
            self.toggle(was_open)
        return False

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                _LOGGER.exception("Menu state listener %r failed", listener)
