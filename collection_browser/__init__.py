"""Paginated collection browser with cross-page selection."""

__version__ = "0.1.0"
