"""Flip-to-opposite side resolution for overlays (pure, no Qt).

The resolver only ever swaps the preferred side for its opposite. It never
falls back to a perpendicular side and never clamps to the viewport edges; when
neither side fits the overlay keeps the preferred side and may overflow.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from overlay_engine.geometry import Rect, Side, Viewport

_LOGGER = logging.getLogger("OverlayEngine.Position")

ALIGNMENTS = ("start", "end")


def fits_top(overlay_rect: Rect, anchor_rect: Rect) -> bool:
    return anchor_rect.top >= overlay_rect.height


def fits_bottom(overlay_rect: Rect, anchor_rect: Rect, viewport: Viewport) -> bool:
    return overlay_rect.height <= viewport.height - anchor_rect.bottom


def fits_left(overlay_rect: Rect, anchor_rect: Rect) -> bool:
    return anchor_rect.left >= overlay_rect.width


def fits_right(overlay_rect: Rect, anchor_rect: Rect, viewport: Viewport) -> bool:
    return overlay_rect.width <= viewport.width - anchor_rect.right


def _fits(side: Side, overlay_rect: Rect, anchor_rect: Rect, viewport: Viewport) -> bool:
    if side is Side.TOP:
        return fits_top(overlay_rect, anchor_rect)
    if side is Side.BOTTOM:
        return fits_bottom(overlay_rect, anchor_rect, viewport)
    if side is Side.LEFT:
        return fits_left(overlay_rect, anchor_rect)
    return fits_right(overlay_rect, anchor_rect, viewport)


def resolve_side(
    overlay_rect: Rect,
    anchor_rect: Rect,
    viewport: Viewport,
    preferred: object,
    trace_fn: Optional[Callable[[str, dict], None]] = None,
) -> Side:
    """Return the side the overlay should render on.

    The preferred side is kept unless it does not fit while its opposite does.
    Unrecognized preferred values resolve to ``Side.TOP``.
    """
    side = Side.parse(preferred)
    if side is None:
        _LOGGER.debug("Unrecognized overlay side %r; defaulting to top", preferred)
        return Side.TOP
    preferred_fits = _fits(side, overlay_rect, anchor_rect, viewport)
    opposite_fits = _fits(side.opposite, overlay_rect, anchor_rect, viewport)
    resolved = side.opposite if not preferred_fits and opposite_fits else side
    if trace_fn:
        trace_fn(
            "position:resolve",
            {
                "preferred": side.value,
                "preferred_fits": preferred_fits,
                "opposite_fits": opposite_fits,
                "resolved": resolved.value,
            },
        )
    if resolved is not side:
        _LOGGER.debug("Flipped overlay from %s to %s", side.value, resolved.value)
    return resolved


@dataclass(frozen=True)
class Placement:
    """A side plus an optional alignment along that side, e.g. ``bottom-end``."""

    side: Side
    alignment: Optional[str] = None

    @classmethod
    def parse(cls, value: object) -> Optional["Placement"]:
        if isinstance(value, Placement):
            return value
        if isinstance(value, Side):
            return cls(value)
        if not isinstance(value, str):
            return None
        side_token, _, align_token = value.partition("-")
        side = Side.parse(side_token)
        if side is None:
            return None
        if not align_token:
            return cls(side)
        if align_token not in ALIGNMENTS:
            return None
        return cls(side, align_token)

    def with_side(self, side: Side) -> "Placement":
        return Placement(side, self.alignment)

    def __str__(self) -> str:
        if self.alignment:
            return f"{self.side.value}-{self.alignment}"
        return self.side.value


def resolve_placement(
    overlay_rect: Rect,
    anchor_rect: Rect,
    viewport: Viewport,
    preferred: object,
) -> Placement:
    """Resolve the side of a placement, keeping its alignment.

    Unrecognized placements resolve to ``top`` with no alignment.
    """
    placement = Placement.parse(preferred)
    if placement is None:
        _LOGGER.debug("Unrecognized overlay placement %r; defaulting to top", preferred)
        return Placement(Side.TOP)
    side = resolve_side(overlay_rect, anchor_rect, viewport, placement.side)
    return placement.with_side(side)
