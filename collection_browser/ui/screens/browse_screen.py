# collection_browser/ui/screens/browse_screen.py
"""
Main browse screen: artworks table, paginator and cross-page selection
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from collection_browser.core.session import BrowserSession
from collection_browser.models.artwork import Artwork
from collection_browser.models.fetch_state import FetchState
from collection_browser.ui.controllers.status_bar import StatusBarController
from collection_browser.ui.messages import FetchStateChanged
from collection_browser.ui.widgets.artwork_table import ArtworkTable
from collection_browser.ui.widgets.pagination import Pagination
from collection_browser.ui.widgets.select_n_modal import SelectNModal

logger = logging.getLogger(__name__)


class BrowseScreen(Screen):
    """Artworks listing with selections that survive navigation."""

    BINDINGS = [
        Binding("space", "toggle_row", "Toggle Row", show=True),
        Binding("a", "toggle_all", "Toggle Page", show=True),
        Binding("n", "select_first_n", "Select N", show=True),
        Binding("c", "clear_selection", "Clear", show=True),
        # left/right/home/end belong to the focused table
        Binding("left_square_bracket", "prev_page", "Prev", show=True),
        Binding("right_square_bracket", "next_page", "Next", show=True),
        Binding("left_curly_bracket", "first_page", "First", show=False),
        Binding("right_curly_bracket", "last_page", "Last", show=False),
        Binding("g", "focus_jump", "Go to", show=True),
        Binding("r", "retry", "Retry", show=True),
    ]

    DEFAULT_CSS = """
    #error-banner {
        display: none;
        color: $error;
        padding: 0 1;
    }

    #error-banner.visible {
        display: block;
    }

    #status-bar {
        height: 1;
        padding: 0 1;
    }
    """

    # ------------------------------------------------------------------ #

    def __init__(
        self,
        session: BrowserSession,
        config: Dict[str, Any],
        *,
        id: str = "browse_screen",
    ) -> None:
        super().__init__(id=id)
        self.session = session
        self.config = config

    # ------------------------------------------------------------------ #
    # Compose & mount
    # ------------------------------------------------------------------ #

    def compose(self) -> ComposeResult:
        ui_cfg = self.config.get("ui", {})
        yield Header(show_clock=True)

        with Vertical(id="content-area"):
            yield Static(id="error-banner", markup=False)
            yield ArtworkTable(truncate=ui_cfg.get("truncate", 60), id="artworks-table")
            yield Pagination(
                page_size=self.session.page_size,
                page_size_options=ui_cfg.get("page_size_options", (6, 12, 24, 48, 100)),
                id="pagination",
            )

        yield Static(id="status-bar", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one(ArtworkTable)
        table.styles.height = "1fr"

        self.status_controller = StatusBarController(self.query_one("#status-bar", Static))

        self.session.subscribe(self._on_session_state)
        self.sync_view()
        if self.session.last_success is None:
            self.session.start()

    def on_unmount(self) -> None:
        self.session.unsubscribe(self._on_session_state)

    def _on_session_state(self, state: FetchState) -> None:
        self.post_message(FetchStateChanged(state))

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def on_fetch_state_changed(self, event: FetchStateChanged) -> None:
        self.sync_view()

    def sync_view(self) -> None:
        """Redraw every widget from the session."""
        session = self.session

        table = self.query_one(ArtworkTable)
        table.loading = session.is_loading
        table.show_items(session.visible_items, session.selection)

        self.query_one(Pagination).update_view(
            session.page_view, session.page_size, session.navigation_view
        )

        banner = self.query_one("#error-banner", Static)
        message = session.error_message
        if message:
            banner.update(f"Failed to load: {message}")
            banner.add_class("visible")
        else:
            banner.remove_class("visible")

        self.status_controller.update(session)

    # ------------------------------------------------------------------ #
    # Selection actions
    # ------------------------------------------------------------------ #

    def action_toggle_row(self) -> None:
        table = self.query_one(ArtworkTable)
        if table.row_count == 0:
            return
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        self._toggle_by_key(row_key.value)

    def on_artwork_table_row_toggled(self, event: ArtworkTable.RowToggled) -> None:
        self._toggle_by_key(event.row_key)

    def action_toggle_all(self) -> None:
        self.session.selection.toggle_all_visible()
        self.sync_view()

    def action_select_first_n(self) -> None:
        page_length = len(self.session.visible_items)
        if page_length == 0:
            self.notify("Nothing to select on this page", severity="warning", timeout=3)
            return

        def apply(count: Optional[int]) -> None:
            if count is not None:
                self.session.selection.select_first_n(count)
                self.sync_view()

        self.app.push_screen(SelectNModal(page_length), apply)

    def action_clear_selection(self) -> None:
        if self.session.selection.count:
            self.session.selection.clear_all()
            self.notify("Selection cleared", timeout=2)
            self.sync_view()

    def _toggle_by_key(self, row_key: Optional[str]) -> None:
        artwork = self._artwork_for_key(row_key)
        if artwork is None:
            return
        self.session.selection.toggle_one(artwork)
        self.sync_view()

    def _artwork_for_key(self, row_key: Optional[str]) -> Optional[Artwork]:
        return next((a for a in self.session.visible_items if str(a.id) == row_key), None)

    # ------------------------------------------------------------------ #
    # Navigation actions
    # ------------------------------------------------------------------ #

    def action_prev_page(self) -> None:
        self.session.prev_page()

    def action_next_page(self) -> None:
        self.session.next_page()

    def action_first_page(self) -> None:
        self.session.first_page()

    def action_last_page(self) -> None:
        self.session.last_page()

    def action_retry(self) -> None:
        self.session.retry()

    def action_focus_jump(self) -> None:
        self.query_one(Pagination).focus_jump()

    def on_pagination_navigate(self, event: Pagination.Navigate) -> None:
        move = {
            "first": self.session.first_page,
            "prev": self.session.prev_page,
            "next": self.session.next_page,
            "last": self.session.last_page,
        }.get(event.direction)
        if move is not None:
            move()

    def on_pagination_page_size_changed(self, event: Pagination.PageSizeChanged) -> None:
        self.session.change_page_size(event.page_size)

    def on_pagination_jump_requested(self, event: Pagination.JumpRequested) -> None:
        if self.session.jump_to_input(event.text) is None:
            logger.debug(f"Go-to entry {event.text!r} ignored")
        self.query_one(ArtworkTable).focus()
