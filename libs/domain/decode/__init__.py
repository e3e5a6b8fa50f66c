from .service import DecodeService, to_luma

__all__ = ["DecodeService", "to_luma"]
