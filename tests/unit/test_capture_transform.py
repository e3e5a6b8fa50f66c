from __future__ import annotations

import pytest
from adapters.mss_capture import solid_frame
from domain.capture import crop_frame, monitor_box, resolve_monitor, to_local_box
from domain.errors import CropOutOfBounds, NoMonitorFound
from domain.types import BoundingBox, Coord
from ports.vision import Frame, Monitor

LEFT = Monitor(id=1, x=0, y=0, width=1920, height=1080)
RIGHT = Monitor(id=2, x=1920, y=0, width=1280, height=1024)
ABOVE = Monitor(id=3, x=0, y=-1080, width=1920, height=1080)


def _frame_of_indices(width: int, height: int) -> Frame:
    """Each pixel's B byte is its x, G byte its y, so crops are easy to check."""
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data += bytes((x, y, 0, 255))
    return Frame(width=width, height=height, bgra=bytes(data))


# --- resolver -----------------------------------------------------------------


def test_monitor_box_uses_origin_and_size():
    assert monitor_box(RIGHT) == BoundingBox.new(1920, 0, 1280, 1024)


def test_resolves_monitor_containing_selection():
    sel = BoundingBox.normalized(2000, 100, 2100, 200)
    assert resolve_monitor(sel, [LEFT, RIGHT]) is RIGHT


def test_negative_origin_monitor():
    sel = BoundingBox.normalized(10, -500, 200, -300)
    assert resolve_monitor(sel, [LEFT, RIGHT, ABOVE]) is ABOVE


def test_straddling_selection_resolves_to_first_in_enumeration_order():
    sel = BoundingBox.normalized(1900, 100, 1950, 150)
    assert resolve_monitor(sel, [LEFT, RIGHT]) is LEFT
    assert resolve_monitor(sel, [RIGHT, LEFT]) is RIGHT


def test_selection_ending_on_seam_resolves_to_one_monitor():
    sel = BoundingBox.normalized(1800, 100, 1920, 150)
    assert resolve_monitor(sel, [RIGHT, LEFT]) is LEFT


def test_degenerate_selection_on_seam_finds_nothing():
    sel = BoundingBox.normalized(1920, 100, 1920, 300)
    with pytest.raises(NoMonitorFound):
        resolve_monitor(sel, [LEFT, RIGHT])


def test_offscreen_and_empty_lists_fail():
    with pytest.raises(NoMonitorFound):
        resolve_monitor(BoundingBox.normalized(5000, 5000, 5100, 5100), [LEFT, RIGHT])
    with pytest.raises(NoMonitorFound):
        resolve_monitor(BoundingBox.normalized(0, 0, 10, 10), [])


# --- local box ----------------------------------------------------------------


def test_local_box_subtracts_monitor_origin():
    mon = Monitor(id=7, x=100, y=50, width=800, height=600)
    local = to_local_box(BoundingBox.normalized(120, 60, 140, 90), mon)
    assert local.top_left == Coord(20, 10)
    assert local.bottom_right == Coord(40, 40)
    assert local.top_right.x - local.top_left.x == 20
    assert local.bottom_left.y - local.top_left.y == 30


def test_local_box_may_touch_far_edges():
    mon = Monitor(id=1, x=0, y=0, width=100, height=50)
    local = to_local_box(BoundingBox.normalized(0, 0, 100, 50), mon)
    assert local.bottom_right == Coord(100, 50)


@pytest.mark.parametrize(
    "sel",
    [
        BoundingBox.normalized(1900, 100, 1950, 150),  # runs off the right edge
        BoundingBox.normalized(10, -5, 50, 50),  # above the top
        BoundingBox.normalized(10, 1000, 50, 1090),  # below the bottom
    ],
)
def test_local_box_out_of_bounds_is_not_clamped(sel: BoundingBox):
    with pytest.raises(CropOutOfBounds):
        to_local_box(sel, LEFT)


# --- crop ---------------------------------------------------------------------


def test_crop_takes_width_from_x_and_height_from_y():
    frame = _frame_of_indices(16, 12)
    local = BoundingBox.normalized(2, 3, 7, 11)  # 5 wide, 8 tall
    out = crop_frame(frame, local)
    assert (out.width, out.height) == (5, 8)
    assert len(out.bgra) == 5 * 8 * 4
    # first pixel is (2, 3), last pixel is (6, 10)
    assert out.bgra[:2] == bytes((2, 3))
    assert out.bgra[-4:-2] == bytes((6, 10))


def test_full_frame_crop_is_identity():
    frame = _frame_of_indices(6, 4)
    assert crop_frame(frame, BoundingBox.new(0, 0, 6, 4)).bgra == frame.bgra


@pytest.mark.parametrize(
    "local",
    [
        BoundingBox.new(3, 3, 0, 2),  # zero width
        BoundingBox.new(3, 3, 2, 0),  # zero height
        BoundingBox.new(8, 0, 4, 4),  # past the right edge
        BoundingBox.new(0, 0, 4, 11),  # past the bottom
        BoundingBox.new_from_coords(5, 5, 2, 2),  # inverted
    ],
)
def test_bad_crops_raise(local: BoundingBox):
    with pytest.raises(CropOutOfBounds):
        crop_frame(solid_frame(10, 10), local)


def test_short_buffer_raises():
    frame = Frame(width=10, height=10, bgra=b"\x00" * 40)
    with pytest.raises(CropOutOfBounds):
        crop_frame(frame, BoundingBox.new(0, 0, 2, 2))


def test_crop_keeps_alpha_and_channel_order():
    frame = solid_frame(4, 4, (10, 20, 30, 40))
    out = crop_frame(frame, BoundingBox.new(1, 1, 2, 3))
    assert out.size() == (2, 3)
    assert out.bgra == bytes((10, 20, 30, 40)) * 6
