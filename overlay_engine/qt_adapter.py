"""Translate already-measured Qt values and key events into engine inputs."""
from __future__ import annotations

from typing import Dict, Optional, Union

from PyQt6.QtCore import QRect, QRectF, QSize, QSizeF, Qt

from overlay_engine.geometry import Rect, Viewport
from overlay_engine.keys import MenuKey
from overlay_engine.menu_controller import MenuController

_QT_KEYS: Dict[int, MenuKey] = {
    Qt.Key.Key_Return.value: MenuKey.ENTER,
    Qt.Key.Key_Enter.value: MenuKey.ENTER,
    Qt.Key.Key_Space.value: MenuKey.SPACE,
    Qt.Key.Key_Up.value: MenuKey.ARROW_UP,
    Qt.Key.Key_Down.value: MenuKey.ARROW_DOWN,
    Qt.Key.Key_Escape.value: MenuKey.ESCAPE,
    Qt.Key.Key_Tab.value: MenuKey.TAB,
    Qt.Key.Key_Home.value: MenuKey.HOME,
    Qt.Key.Key_End.value: MenuKey.END,
}


def rect_from_qrect(rect: Union[QRect, QRectF]) -> Rect:
    # QRect.right()/bottom() are inclusive (x + width - 1); use the extents instead.
    return Rect.from_xywh(rect.x(), rect.y(), rect.width(), rect.height())


def viewport_from_qsize(size: Union[QSize, QSizeF]) -> Viewport:
    return Viewport(width=float(size.width()), height=float(size.height()))


def key_from_qt(key_code: object, text: str = "") -> Optional[MenuKey]:
    code = getattr(key_code, "value", key_code)
    try:
        key = _QT_KEYS.get(int(code))  # type: ignore[call-overload]
    except (TypeError, ValueError):
        key = None
    if key is None and text:
        return MenuKey.parse(text)
    return key


def dispatch_qt_key(controller: MenuController, key_code: object, text: str = "") -> bool:
    """Feed a Qt key press to the controller; returns True when the event should be accepted."""
    key = key_from_qt(key_code, text)
    if key is None:
        return False
    return controller.handle_key(key)
