# collection_browser/di.py
"""
Very small dependency-injection helper.
"""

from __future__ import annotations

from typing import Any, Dict

from collection_browser.core.session import BrowserSession
from collection_browser.errors import ConfigError
from collection_browser.services.artic_client import ArticClient
from collection_browser.services.demo_source import DemoSource


class Container:
    """Holds lazily-created singletons."""

    def __init__(self, config: Dict[str, Any], *, source: ArticClient | DemoSource | None = None) -> None:
        self._cfg = config
        self._source: ArticClient | DemoSource | None = source
        self._session: BrowserSession | None = None

    # ---------- data source ----------
    @property
    def source(self) -> ArticClient | DemoSource:
        if self._source is None:
            api_cfg = self._cfg.get("api", {})
            kind = api_cfg.get("source", "artic")
            if kind == "artic":
                self._source = ArticClient.from_config(api_cfg)
            elif kind == "demo":
                self._source = DemoSource(latency=0.3)
            else:
                raise ConfigError(f"Unknown data source '{kind}' (expected 'artic' or 'demo')")
        return self._source

    # ---------- session ----------
    @property
    def session(self) -> BrowserSession:
        if self._session is None:
            self._session = BrowserSession(
                self.source.fetch_page,
                page_size=self._cfg.get("ui", {}).get("page_size", 12),
                cancel_superseded=self._cfg.get("api", {}).get("cancel_superseded", False),
            )
        return self._session

    async def aclose(self) -> None:
        if self._session is not None:
            self._session.close()
        if isinstance(self._source, ArticClient):
            await self._source.aclose()


# convenience factory
def build_container(config: Dict[str, Any]) -> Container:
    """Create a container for the given config."""
    return Container(config)
