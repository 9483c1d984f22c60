# collection_browser/core/session.py
"""
Browser session: the object the rendering layer talks to.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Callable, List, Optional, Sequence

from collection_browser.core.fetch_controller import FetchController, FetchPage
from collection_browser.core.paging import DEFAULT_PAGE_SIZE, PageView, can_jump, derive, parse_jump_input
from collection_browser.core.selection import SelectionReconciler
from collection_browser.models.fetch_state import Error, FetchState, Loading, Success
from collection_browser.models.pagination import PageResult, PaginationMeta

logger = logging.getLogger(__name__)

SessionListener = Callable[[FetchState], None]


class BrowserSession:
    """Ties page navigation, page fetching and the selection together."""

    def __init__(
        self,
        fetch_page: FetchPage,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        start_page: int = 1,
        selection: Optional[SelectionReconciler] = None,
        cancel_superseded: bool = False,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        if start_page < 1:
            raise ValueError(f"start_page must be >= 1, got {start_page}")

        self.current_page = start_page
        self.page_size = page_size
        self.selection: SelectionReconciler = selection or SelectionReconciler()
        self.last_success: Optional[PageResult] = None

        self._fetch = FetchController(fetch_page, cancel_superseded=cancel_superseded)
        self._fetch.subscribe(self._on_fetch_state)
        self._listeners: List[SessionListener] = []

    # ------------------------------------------------------------------ #
    # listeners
    # ------------------------------------------------------------------ #

    def subscribe(self, callback: SessionListener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: SessionListener) -> bool:
        if callback in self._listeners:
            self._listeners.remove(callback)
            return True
        return False

    # ------------------------------------------------------------------ #
    # read side
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> FetchState:
        return self._fetch.state

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def error_message(self) -> Optional[str]:
        state = self.state
        return state.message if isinstance(state, Error) else None

    @property
    def visible_items(self) -> Sequence:
        """Items of the last page that loaded, kept on screen while the next one loads."""
        return self.last_success.items if self.last_success else ()

    @property
    def page_view(self) -> Optional[PageView]:
        """Paging values of the page on screen."""
        if self.last_success is None:
            return None
        return derive(self.last_success.pagination)

    @property
    def navigation_view(self) -> Optional[PageView]:
        """
        Paging values of the requested page.

        Differs from `page_view` while a different page or page size is
        loading or has failed. Navigation always starts from here.
        """
        position = self._position()
        return derive(position) if position is not None else None

    # ------------------------------------------------------------------ #
    # navigation intents
    # ------------------------------------------------------------------ #

    def start(self) -> asyncio.Task:
        return self._request()

    def retry(self) -> asyncio.Task:
        return self._request()

    def go_to_page(self, page: int) -> asyncio.Task:
        """
        Request `page` at the current page size.

        Raises:
            ValueError: if `page` is below 1 or past the last known page
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        position = self._position()
        if position is not None and page > max(position.total_pages, 1):
            raise ValueError(f"page {page} is past the last page ({position.total_pages})")
        self.current_page = page
        return self._request()

    def first_page(self) -> Optional[asyncio.Task]:
        return self._go_to_target(lambda view: view.targets.first)

    def prev_page(self) -> Optional[asyncio.Task]:
        return self._go_to_target(lambda view: view.targets.prev)

    def next_page(self) -> Optional[asyncio.Task]:
        return self._go_to_target(lambda view: view.targets.next)

    def last_page(self) -> Optional[asyncio.Task]:
        return self._go_to_target(lambda view: view.targets.last)

    def jump_to(self, target: int) -> Optional[asyncio.Task]:
        """Go to `target` if it is a valid page other than the requested one; otherwise do nothing."""
        position = self._position()
        if position is None or not can_jump(position, target):
            logger.debug(f"Ignoring jump to page {target}")
            return None
        return self.go_to_page(target)

    def jump_to_input(self, text: str) -> Optional[asyncio.Task]:
        target = parse_jump_input(text)
        if target is None:
            return None
        return self.jump_to(target)

    def change_page_size(self, page_size: int) -> Optional[asyncio.Task]:
        """
        Switch page size and return to page 1.

        The selection is kept as it is, including ids selected on other pages.
        """
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        if page_size == self.page_size:
            return None
        logger.info(f"Page size {self.page_size} -> {page_size}, back to page 1")
        self.page_size = page_size
        self.current_page = 1
        return self._request()

    def close(self) -> None:
        self._fetch.cancel_pending()

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    def _position(self) -> Optional[PaginationMeta]:
        """Requested page and size, with the page count known for that size."""
        if self.last_success is None:
            return None
        shown = self.last_success.pagination
        if shown.page_size == self.page_size:
            total_pages = shown.total_pages
        else:
            # the remote may cap deep paging below total_count
            reachable = min(shown.total_count, shown.total_pages * shown.page_size)
            total_pages = math.ceil(reachable / self.page_size)
        return PaginationMeta(
            current_page=min(self.current_page, max(total_pages, 1)),
            total_pages=total_pages,
            total_count=shown.total_count,
            page_size=self.page_size,
        )

    def _go_to_target(self, pick: Callable[[PageView], Optional[int]]) -> Optional[asyncio.Task]:
        view = self.navigation_view
        if view is None:
            return None
        target = pick(view)
        if target is None:
            return None
        return self.go_to_page(target)

    def _request(self) -> asyncio.Task:
        return self._fetch.request(self.current_page, self.page_size)

    def _on_fetch_state(self, state: FetchState) -> None:
        if isinstance(state, Success):
            self.last_success = state.result
            self.selection.set_visible(state.result.items)

        for callback in list(self._listeners):
            try:
                callback(state)
            except Exception as e:
                logger.error(f"Error in session listener: {e}", exc_info=True)
