# collection_browser/core/__init__.py

from collection_browser.core.fetch_controller import FetchController
from collection_browser.core.paging import PAGE_SIZE_OPTIONS, DEFAULT_PAGE_SIZE, NavigableTargets, PageView, can_jump, derive, parse_jump_input
from collection_browser.core.selection import SelectionReconciler, reconcile
from collection_browser.core.session import BrowserSession

__all__ = [
    "BrowserSession",
    "DEFAULT_PAGE_SIZE",
    "FetchController",
    "NavigableTargets",
    "PAGE_SIZE_OPTIONS",
    "PageView",
    "SelectionReconciler",
    "can_jump",
    "derive",
    "parse_jump_input",
    "reconcile",
]
