from .errors import (
    ConfigurationError,
    DirTallyError,
    NotFoundError,
    ParseError,
    QueryError,
    StructuralError,
)
from .model import Ascend, DescendInto, DirPath, ListEntries, ListingItem, NavigationEvent
from .settings import DiskSettings

__all__ = [
    "Ascend",
    "ConfigurationError",
    "DescendInto",
    "DirPath",
    "DirTallyError",
    "DiskSettings",
    "ListEntries",
    "ListingItem",
    "NavigationEvent",
    "NotFoundError",
    "ParseError",
    "QueryError",
    "StructuralError",
]
