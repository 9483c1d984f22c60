# collection_browser/ui/messages.py
"""Message classes for the application."""

from __future__ import annotations

from textual.message import Message

from collection_browser.models.fetch_state import FetchState


class FetchStateChanged(Message):
    """The browser session moved to a new fetch state."""

    def __init__(self, state: FetchState) -> None:
        """Initialize with the new state."""
        super().__init__()
        self.state = state
