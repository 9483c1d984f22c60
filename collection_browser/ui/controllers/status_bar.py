# collection_browser/ui/controllers/status_bar.py
"""Formats and updates the status bar."""

from __future__ import annotations

from textual.widgets import Static

from collection_browser.core.session import BrowserSession
from collection_browser.models.fetch_state import Error, Idle, Loading
from collection_browser.utils.formatters import format_range


class StatusBarController:
    """Builds the human-readable status text and writes it to the bar."""

    def __init__(self, status_bar: Static) -> None:
        self._bar = status_bar

    def update(self, session: BrowserSession) -> None:
        """Refresh the whole status line from the session."""
        self._bar.update(self.build_text(session))

    @staticmethod
    def build_text(session: BrowserSession) -> str:
        view = session.page_view
        parts: list[str] = [f"Artworks: {format_range(view)}"]
        if view is not None:
            parts.append(f"Page: {view.current_page}/{view.total_pages}")
        parts.append(f"Per page: {session.page_size}")

        selection = session.selection
        if selection.count:
            on_page = len(selection.selected_on_page)
            parts.append(f"Selected: {selection.count} ({on_page} on page)")

        state = session.state
        if isinstance(state, (Idle, Loading)):
            page = state.page if isinstance(state, Loading) else session.current_page
            parts.append(f"Loading page {page}…")
        elif isinstance(state, Error):
            parts.append("Load failed, press r to retry")

        return " | ".join(parts)
