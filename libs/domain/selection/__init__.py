from .model import GestureState, SelectionGesture, advance
from .service import SelectionService

__all__ = ["GestureState", "SelectionGesture", "SelectionService", "advance"]
