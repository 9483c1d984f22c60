# collection_browser/core/selection.py

import logging
from operator import attrgetter
from typing import AbstractSet, Any, Callable, FrozenSet, Generic, Hashable, Iterable, List, Sequence, Set, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
ItemId = Hashable


def reconcile(
    selected: AbstractSet[ItemId],
    visible_ids: Iterable[ItemId],
    desired_visible: Iterable[ItemId],
) -> FrozenSet[ItemId]:
    """
    Replace the page-local part of a selection.

    Ids outside `visible_ids` are kept as they are; the visible part of the
    selection becomes exactly `desired_visible`.
    """
    return frozenset(selected).difference(visible_ids) | frozenset(desired_visible)


class SelectionReconciler(Generic[T]):
    """
    Owns the set of selected item ids across page changes.

    The rendering layer reads `snapshot` and the derived properties and routes
    every change through the intent methods below.
    """

    def __init__(self, key: Callable[[T], ItemId] = attrgetter("id")):
        self._key = key
        self._selected: Set[ItemId] = set()
        self._visible: Tuple[T, ...] = ()

    # ------------------------------------------------------------------ #
    # read side
    # ------------------------------------------------------------------ #

    @property
    def snapshot(self) -> FrozenSet[ItemId]:
        return frozenset(self._selected)

    @property
    def count(self) -> int:
        return len(self._selected)

    @property
    def visible_items(self) -> Tuple[T, ...]:
        return self._visible

    @property
    def visible_ids(self) -> List[ItemId]:
        return [self._key(item) for item in self._visible]

    @property
    def selected_on_page(self) -> List[T]:
        return [item for item in self._visible if self._key(item) in self._selected]

    @property
    def all_selected(self) -> bool:
        return len(self._visible) > 0 and len(self.selected_on_page) == len(self._visible)

    @property
    def some_visible_selected(self) -> bool:
        """True when part, but not all, of the visible page is selected."""
        on_page = len(self.selected_on_page)
        return 0 < on_page < len(self._visible)

    def is_selected(self, item: T) -> bool:
        return self._key(item) in self._selected

    def __contains__(self, item_id: Any) -> bool:
        return item_id in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    # ------------------------------------------------------------------ #
    # write side
    # ------------------------------------------------------------------ #

    def set_visible(self, items: Sequence[T]) -> None:
        """Switch to a new page of items. The selection itself is untouched."""
        self._visible = tuple(items)

    def toggle_one(self, item: T) -> None:
        item_id = self._key(item)
        if item_id in self._selected:
            self._selected.discard(item_id)
        else:
            self._selected.add(item_id)

    def toggle_all_visible(self) -> None:
        desired = [] if self.all_selected else self.visible_ids
        self._apply(desired)

    def select_first_n(self, n: int) -> None:
        """Select exactly the first `n` visible items, clamped to [1, page length]."""
        if not self._visible:
            logger.debug("select_first_n ignored: no visible items")
            return
        n = min(max(n, 1), len(self._visible))
        self._apply(self.visible_ids[:n])

    def clear_all(self) -> None:
        """Drop every selection, on every page."""
        self._selected.clear()

    def _apply(self, desired_visible: Iterable[ItemId]) -> None:
        self._selected = set(reconcile(self._selected, self.visible_ids, desired_visible))
