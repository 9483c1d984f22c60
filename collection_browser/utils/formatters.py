"""
Formatting utility functions
"""

from typing import Optional

from collection_browser.core.paging import PageView

PLACEHOLDER = "—"


def truncate_text(text: Optional[str], max_length: int = 80, ellipsis: str = "…") -> str:
    """
    Truncate text to a maximum length

    Args:
        text: Text to truncate
        max_length: Maximum length, not counting the ellipsis
        ellipsis: Ellipsis string to append

    Returns:
        Truncated text, or a dash placeholder for empty values
    """
    if not text:
        return PLACEHOLDER

    # Multi-line credits (artist_display) read better on one line
    text = " ".join(text.split())
    if len(text) <= max_length:
        return text

    return text[:max_length] + ellipsis


def format_year(value: Optional[int]) -> str:
    if value is None:
        return PLACEHOLDER
    return str(value)


def format_range(view: Optional[PageView]) -> str:
    """Record range label, e.g. '13–24 of 125'."""
    if view is None or not view.has_records:
        return "No records"
    return f"{view.range_start:,}–{view.range_end:,} of {view.total_count:,}"


def format_page_indicator(view: Optional[PageView]) -> str:
    if view is None:
        return "Page [b]-[/b] of [b]-[/b]"
    return f"Page [b]{view.current_page:,}[/b] of [b]{view.total_pages:,}[/b]"
