from .fakes import ScriptedPointerPort, drag

__all__ = ["ScriptedPointerPort", "drag"]
