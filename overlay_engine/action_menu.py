from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

from overlay_engine.config import MenuConfig
from overlay_engine.geometry import Rect, Viewport
from overlay_engine.logging_utils import configure_engine_logger
from overlay_engine.menu_controller import LoggerFn, MenuController
from overlay_engine.options import MenuOption, OptionLike
from overlay_engine.position_resolver import Placement, resolve_placement


class ActionMenu:
    """Composes a menu controller with placement resolution for its dropdown."""

    def __init__(
        self,
        options: Iterable[OptionLike],
        config: Optional[MenuConfig] = None,
        *,
        on_open: Optional[Callable[[], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
        on_option_select: Optional[Callable[[MenuOption], None]] = None,
        on_option_hover: Optional[Callable[[MenuOption], None]] = None,
        logger: Optional[LoggerFn] = None,
        log_dir: Optional[Path] = None,
        debug_logging: bool = False,
    ) -> None:
        if log_dir is not None:
            configure_engine_logger(log_dir, debug_enabled=debug_logging)
        self.config = config or MenuConfig()
        self.controller = MenuController(
            options,
            is_open=self.config.is_open,
            close_on_select=self.config.close_on_select,
            on_open=on_open,
            on_close=on_close,
            on_option_select=on_option_select,
            on_option_hover=on_option_hover,
            logger=logger,
        )
        self._placement: Placement = self.config.placement

    @property
    def placement(self) -> Placement:
        """Last resolved placement (the configured one until measured)."""
        return self._placement

    def update_placement(self, overlay_rect: Rect, anchor_rect: Rect, viewport: Viewport) -> Placement:
        """Re-resolve the dropdown placement; call on open and on viewport resize/scroll."""
        self._placement = resolve_placement(overlay_rect, anchor_rect, viewport, self.config.placement)
        return self._placement

    def handle_key(self, key: object) -> bool:
        return self.controller.handle_key(key)
