from .crop import crop_frame, to_local_box
from .resolver import monitor_box, resolve_monitor

__all__ = ["crop_frame", "monitor_box", "resolve_monitor", "to_local_box"]
