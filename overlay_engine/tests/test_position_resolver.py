from __future__ import annotations

import pytest

from overlay_engine.geometry import Rect, Side, Viewport
from overlay_engine.position_resolver import Placement, resolve_placement, resolve_side

VIEWPORT = Viewport(width=1000.0, height=800.0)
OVERLAY = Rect.from_size(200.0, 100.0)


def _anchor(top: float, bottom: float, left: float = 400.0, right: float = 500.0) -> Rect:
    return Rect(top=top, right=right, bottom=bottom, left=left, width=right - left, height=bottom - top)


def test_top_flips_to_bottom_when_only_bottom_fits():
    anchor = _anchor(top=10.0, bottom=50.0)
    assert resolve_side(OVERLAY, anchor, VIEWPORT, "top") is Side.BOTTOM


def test_top_kept_when_it_fits_even_if_bottom_also_fits():
    anchor = _anchor(top=150.0, bottom=190.0)
    assert resolve_side(OVERLAY, anchor, VIEWPORT, Side.TOP) is Side.TOP


def test_neither_side_fits_keeps_preferred():
    anchor = _anchor(top=5.0, bottom=795.0)
    assert resolve_side(OVERLAY, anchor, VIEWPORT, "top") is Side.TOP
    assert resolve_side(OVERLAY, anchor, VIEWPORT, "bottom") is Side.BOTTOM


def test_bottom_flips_to_top():
    anchor = _anchor(top=700.0, bottom=750.0)
    assert resolve_side(OVERLAY, anchor, VIEWPORT, "bottom") is Side.TOP


def test_bottom_fits_exactly_at_edge():
    # 800 - 700 = 100 leaves exactly the overlay height.
    anchor = _anchor(top=650.0, bottom=700.0)
    assert resolve_side(OVERLAY, anchor, VIEWPORT, "bottom") is Side.BOTTOM


@pytest.mark.parametrize(
    ("anchor", "preferred", "expected"),
    [
        # anchor.top == overlay height, bottom has only 50 free
        (_anchor(top=100.0, bottom=750.0), "bottom", Side.TOP),
        # anchor.left == overlay width, right has only 100 free
        (_anchor(top=300.0, bottom=340.0, left=200.0, right=900.0), "right", Side.LEFT),
        # 1000 - 800 leaves exactly the overlay width, left has only 100
        (_anchor(top=300.0, bottom=340.0, left=100.0, right=800.0), "left", Side.RIGHT),
    ],
)
def test_opposite_side_fits_exactly_at_edge(anchor, preferred, expected):
    assert resolve_side(OVERLAY, anchor, VIEWPORT, preferred) is expected


@pytest.mark.parametrize(
    ("left", "right", "preferred", "expected"),
    [
        (100.0, 150.0, "left", Side.RIGHT),  # 100 < 200 on the left, 850 free on the right
        (300.0, 350.0, "left", Side.LEFT),
        (850.0, 900.0, "right", Side.LEFT),  # only 100 free on the right
        (100.0, 150.0, "right", Side.RIGHT),
        (50.0, 950.0, "right", Side.RIGHT),  # neither fits
    ],
)
def test_horizontal_flips(left, right, preferred, expected):
    anchor = _anchor(top=300.0, bottom=340.0, left=left, right=right)
    assert resolve_side(OVERLAY, anchor, VIEWPORT, preferred) is expected


def test_never_falls_back_to_perpendicular_side():
    tall = Rect.from_size(50.0, 900.0)
    anchor = _anchor(top=300.0, bottom=340.0)
    assert resolve_side(tall, anchor, VIEWPORT, "top") is Side.TOP


@pytest.mark.parametrize("preferred", ["middle", "", None, 3, "bottom-end", "BOTTOM", " BOTTOM", " top", " Bottom", "Left "])
def test_unrecognized_side_defaults_to_top(preferred):
    anchor = _anchor(top=10.0, bottom=50.0)
    assert resolve_side(OVERLAY, anchor, VIEWPORT, preferred) is Side.TOP


def test_resolve_side_is_deterministic():
    anchor = _anchor(top=10.0, bottom=50.0)
    results = {resolve_side(OVERLAY, anchor, VIEWPORT, "top") for _ in range(5)}
    assert results == {Side.BOTTOM}


def test_trace_reports_fit_details():
    traces = []
    anchor = _anchor(top=10.0, bottom=50.0)

    resolve_side(OVERLAY, anchor, VIEWPORT, "top", trace_fn=lambda stage, details: traces.append((stage, details)))

    assert traces == [
        (
            "position:resolve",
            {"preferred": "top", "preferred_fits": False, "opposite_fits": True, "resolved": "bottom"},
        )
    ]


def test_placement_parse_variants():
    assert Placement.parse("bottom-end") == Placement(Side.BOTTOM, "end")
    assert Placement.parse("left") == Placement(Side.LEFT)
    assert Placement.parse("Left") is None
    assert Placement.parse(" bottom-end") is None
    assert Placement.parse(Side.RIGHT) == Placement(Side.RIGHT)
    assert Placement.parse("bottom-middle") is None
    assert Placement.parse("sideways") is None
    assert str(Placement(Side.TOP, "start")) == "top-start"


def test_resolve_placement_keeps_alignment_when_flipping():
    anchor = _anchor(top=700.0, bottom=750.0)
    placement = resolve_placement(OVERLAY, anchor, VIEWPORT, "bottom-end")
    assert placement == Placement(Side.TOP, "end")
    assert str(placement) == "top-end"


def test_resolve_placement_unrecognized_defaults_to_top():
    anchor = _anchor(top=700.0, bottom=750.0)
    assert resolve_placement(OVERLAY, anchor, VIEWPORT, "nowhere") == Placement(Side.TOP)


def test_viewport_from_client_prefers_inner_size():
    assert Viewport.from_client(1024, 768, 1000, 700) == Viewport(1024.0, 768.0)
    assert Viewport.from_client(0, 0, 1000, 700) == Viewport(1000.0, 700.0)


def test_rect_from_xywh_derives_edges():
    rect = Rect.from_xywh(10, 20, 30, 40)
    assert (rect.left, rect.top, rect.right, rect.bottom) == (10.0, 20.0, 40.0, 60.0)
    assert (rect.width, rect.height) == (30.0, 40.0)
