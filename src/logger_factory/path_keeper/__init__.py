from .keeper import PathKeeper

__all__ = ["PathKeeper"]
