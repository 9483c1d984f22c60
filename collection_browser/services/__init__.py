"""Paging data sources."""

from collection_browser.services.artic_client import ArticClient
from collection_browser.services.demo_source import DemoSource

__all__ = ["ArticClient", "DemoSource"]
