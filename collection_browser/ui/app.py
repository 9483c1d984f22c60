"""
Main Textual application class for the Collection Browser
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from textual.app import App
from textual.binding import Binding

from collection_browser.di import Container, build_container
from collection_browser.ui.screens.browse_screen import BrowseScreen

logger = logging.getLogger(__name__)


class CollectionBrowserApp(App):
    """Terminal browser for a paginated remote collection."""

    TITLE = "Art Institute of Chicago"
    SUB_TITLE = "Artworks Collection"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, config: Dict[str, Any], container: Container | None = None) -> None:
        super().__init__()
        self.config = config
        self.container: Container = container or build_container(config)

    def on_mount(self) -> None:
        logger.info("Collection browser mounted")
        self.push_screen(
            BrowseScreen(
                session=self.container.session,
                config=self.config,
                id="browse_screen",
            )
        )

    async def on_unmount(self) -> None:
        await self.container.aclose()
        logger.info("Collection browser closed")
