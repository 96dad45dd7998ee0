from .lookup_homonym import LookupHomonym

__all__ = ["LookupHomonym"]
