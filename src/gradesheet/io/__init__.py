from . import sheet

__all__ = ["sheet"]
