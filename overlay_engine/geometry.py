"""Plain geometry values handed to the engine by the rendering layer (pure, no Qt)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Side(str, Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def opposite(self) -> "Side":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, value: object) -> Optional["Side"]:
        """Return the side for an exact lowercase name, or None for anything else."""
        if isinstance(value, Side):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_OPPOSITES = {
    Side.TOP: Side.BOTTOM,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
}


@dataclass(frozen=True)
class Rect:
    """A measured rectangle in viewport coordinates."""

    top: float
    right: float
    bottom: float
    left: float
    width: float
    height: float

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(
            top=float(y),
            right=float(x) + float(width),
            bottom=float(y) + float(height),
            left=float(x),
            width=float(width),
            height=float(height),
        )

    @classmethod
    def from_size(cls, width: float, height: float) -> "Rect":
        """Rectangle for an overlay whose size is known but not yet placed."""
        return cls.from_xywh(0.0, 0.0, width, height)


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float

    @classmethod
    def from_client(
        cls,
        inner_width: float,
        inner_height: float,
        client_width: float = 0.0,
        client_height: float = 0.0,
    ) -> "Viewport":
        """Prefer the inner window size; fall back per axis to the client area when it is zero."""
        width = inner_width or client_width
        height = inner_height or client_height
        return cls(width=float(width or 0.0), height=float(height or 0.0))
