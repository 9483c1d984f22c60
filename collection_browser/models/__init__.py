"""Collection browser data models."""

from collection_browser.models.artwork import Artwork
from collection_browser.models.fetch_state import Error, FetchState, Idle, Loading, Success
from collection_browser.models.pagination import PageResult, PaginationMeta

__all__ = [
    "Artwork",
    "Error",
    "FetchState",
    "Idle",
    "Loading",
    "PageResult",
    "PaginationMeta",
    "Success",
]
