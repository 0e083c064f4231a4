"""Overlay positioning and navigable-menu interaction engines."""

from .action_menu import ActionMenu
from .close_policy import ALWAYS, NEVER, CloseOnSelect
from .config import MenuConfig
from .focus_navigator import FocusDirection, FocusNavigator
from .geometry import Rect, Side, Viewport
from .keys import MenuKey
from .logging_utils import configure_engine_logger, resolve_logs_dir
from .menu_controller import MenuController, MenuState
from .options import MenuOption, coerce_options
from .position_resolver import Placement, resolve_placement, resolve_side

__all__ = [
    "ActionMenu",
    "ALWAYS",
    "NEVER",
    "CloseOnSelect",
    "MenuConfig",
    "FocusDirection",
    "FocusNavigator",
    "Rect",
    "Side",
    "Viewport",
    "MenuKey",
    "configure_engine_logger",
    "resolve_logs_dir",
    "MenuController",
    "MenuState",
    "MenuOption",
    "coerce_options",
    "Placement",
    "resolve_placement",
    "resolve_side",
]
