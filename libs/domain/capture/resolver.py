from __future__ import annotations

from collections.abc import Sequence

from ports.vision import Monitor

from domain.errors import NoMonitorFound
from domain.types import BoundingBox


def monitor_box(monitor: Monitor) -> BoundingBox:
    return BoundingBox.new(monitor.x, monitor.y, monitor.width, monitor.height)


def resolve_monitor(selection: BoundingBox, monitors: Sequence[Monitor]) -> Monitor:
    """First monitor, in enumeration order, that the selection overlaps.

    A selection spanning several monitors goes to the first match only.
    """
    if not monitors:
        raise NoMonitorFound("no monitors enumerated")
    for mon in monitors:
        if monitor_box(mon).intersects(selection):
            return mon
    raise NoMonitorFound(
        f"selection {selection.top_left}-{selection.bottom_right} overlaps none of "
        f"{len(monitors)} monitor(s)"
    )
