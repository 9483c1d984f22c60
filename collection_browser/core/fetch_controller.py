# collection_browser/core/fetch_controller.py

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Set

from collection_browser.models.fetch_state import Error, FetchState, Idle, Loading, Success
from collection_browser.models.pagination import PageResult

logger = logging.getLogger(__name__)

FetchPage = Callable[[int, int], Awaitable[PageResult]]
StateListener = Callable[[FetchState], None]


class FetchController:
    """
    Drives page requests against a paging data source.

    Every call to `request` is tagged with a generation number. A fetch that
    resolves after a newer request was issued is dropped, so only the most
    recently issued request can ever reach `state`.
    """

    def __init__(self, fetch_page: FetchPage, *, cancel_superseded: bool = False):
        """
        Initialize the controller.

        Args:
            fetch_page: Coroutine function `(page, page_size) -> PageResult`
            cancel_superseded: Also cancel the previous in-flight fetch when a
                newer request is issued
        """
        self._fetch_page = fetch_page
        self._cancel_superseded = cancel_superseded
        self._generation = 0
        self._state: FetchState = Idle()
        self._listeners: List[StateListener] = []
        self._pending: Set[asyncio.Task] = set()
        self._latest_task: Optional[asyncio.Task] = None

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def generation(self) -> int:
        """Tag of the most recently issued request (0 before the first one)."""
        return self._generation

    # ------------------------------------------------------------------ #
    # listeners
    # ------------------------------------------------------------------ #

    def subscribe(self, callback: StateListener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: StateListener) -> bool:
        if callback in self._listeners:
            self._listeners.remove(callback)
            return True
        return False

    # ------------------------------------------------------------------ #
    # requests
    # ------------------------------------------------------------------ #

    def request(self, page: int, page_size: int) -> asyncio.Task:
        """
        Issue a fetch for `page` and move to Loading straight away.

        Must be called while an asyncio loop is running. The returned task
        completes once the fetch has resolved and its result has been either
        applied or discarded.
        """
        self._generation += 1
        tag = self._generation

        if self._cancel_superseded and self._latest_task is not None:
            self._latest_task.cancel()

        logger.info(f"Requesting page {page} (size {page_size}), generation {tag}")
        self._set_state(Loading(page=page, page_size=page_size))

        task = asyncio.get_running_loop().create_task(self._resolve(tag, page, page_size))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        self._latest_task = task
        return task

    def cancel_pending(self) -> None:
        """Cancel every fetch still in flight."""
        for task in list(self._pending):
            task.cancel()

    async def _resolve(self, tag: int, page: int, page_size: int) -> None:
        try:
            result = await self._fetch_page(page, page_size)
        except Exception as e:
            if tag != self._generation:
                logger.debug(f"Discarding stale failure for page {page} (generation {tag}): {e}")
                return
            logger.warning(f"Fetch failed for page {page} (size {page_size}): {e}")
            self._set_state(Error(message=str(e) or "Unknown error"))
            return

        if tag != self._generation:
            logger.debug(f"Discarding stale response for page {page} (generation {tag})")
            return
        self._set_state(Success(result=result))

    def _set_state(self, state: FetchState) -> None:
        self._state = state
        logger.debug(f"Fetch state -> {state.status}")
        for callback in list(self._listeners):
            try:
                callback(state)
            except Exception as e:
                logger.error(f"Error in fetch state listener: {e}", exc_info=True)
