from __future__ import annotations

from PIL import Image
from ports.vision import Frame, Monitor

from domain.errors import CropOutOfBounds
from domain.types import BoundingBox


def to_local_box(selection: BoundingBox, monitor: Monitor) -> BoundingBox:
    """Translate a virtual-desktop box into the monitor's own pixel space.

    Raises CropOutOfBounds rather than clamping a selection that runs off the
    monitor.
    """
    local = selection.translate(-monitor.x, -monitor.y)
    if not BoundingBox.new(0, 0, monitor.width, monitor.height).contains_box(local):
        raise CropOutOfBounds(
            f"local box {local.top_left}-{local.bottom_right} outside "
            f"{monitor.width}x{monitor.height} monitor {monitor.id}"
        )
    return local


def crop_frame(frame: Frame, local: BoundingBox) -> Frame:
    # width from the x-extent, height from the y-extent
    x = local.top_left.x
    y = local.top_left.y
    width = local.top_right.x - local.top_left.x
    height = local.bottom_left.y - local.top_left.y

    # Image.crop pads out-of-range areas instead of failing
    if width <= 0 or height <= 0:
        raise CropOutOfBounds(f"zero-size crop {width}x{height}")
    if x < 0 or y < 0 or x + width > frame.width or y + height > frame.height:
        raise CropOutOfBounds(
            f"crop ({x},{y},{width},{height}) exceeds frame {frame.width}x{frame.height}"
        )

    try:
        img = Image.frombytes("RGBA", frame.size(), frame.bgra, "raw", "BGRA")
        sub = img.crop((x, y, x + width, y + height))
        bgra = sub.tobytes("raw", "BGRA")
    except ValueError as e:
        raise CropOutOfBounds(f"cannot crop {frame.width}x{frame.height} frame: {e}") from e
    return Frame(width=sub.width, height=sub.height, bgra=bgra)
