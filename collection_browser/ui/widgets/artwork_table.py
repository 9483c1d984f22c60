"""
Custom DataTable widget for displaying artworks
"""

from typing import Optional, Sequence

from rich.text import Text
from textual.message import Message
from textual.widgets import DataTable

from collection_browser.core.selection import SelectionReconciler
from collection_browser.models.artwork import Artwork
from collection_browser.utils.formatters import format_year, truncate_text

CHECKED = "[x]"
UNCHECKED = "[ ]"
PARTIAL = "[-]"

COLUMNS = ("Title", "Place of Origin", "Artist", "Inscriptions", "Start", "End")


class ArtworkTable(DataTable):
    """
    DataTable with a selection column and a tri-state header marker
    """

    class RowToggled(Message):
        """Row toggled message"""
        def __init__(self, row_key: str) -> None:
            super().__init__()
            self.row_key = row_key

    def __init__(
        self,
        *,
        truncate: int = 60,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """
        Initialize the ArtworkTable

        Args:
            truncate: Maximum characters shown per text cell
            id: Optional widget ID
            classes: Optional CSS classes
        """
        super().__init__(id=id, classes=classes)
        self.cursor_type = "row"
        self.zebra_stripes = True
        self.truncate = truncate

    def on_mount(self) -> None:
        """Set up the widget when mounted"""
        self.add_class("artworks-table")

    def show_items(self, items: Sequence[Artwork], selection: SelectionReconciler) -> None:
        """Rebuild the table for `items`, keeping the cursor where it was."""
        cursor_row = self.cursor_row

        if selection.all_selected:
            header = CHECKED
        elif selection.some_visible_selected:
            header = PARTIAL
        else:
            header = UNCHECKED

        self.clear(columns=True)
        self.add_column(Text(header), key="selected", width=3)
        for label in COLUMNS:
            self.add_column(label, key=label.lower())

        if not items:
            self.add_row("", Text("No records", style="dim"), "", "", "", "", "", key="empty")
            return

        for artwork in items:
            selected = selection.is_selected(artwork)
            self.add_row(
                Text(CHECKED if selected else UNCHECKED),
                Text(truncate_text(artwork.title, self.truncate)),
                Text(truncate_text(artwork.place_of_origin, self.truncate)),
                Text(truncate_text(artwork.artist_display, self.truncate)),
                Text(truncate_text(artwork.inscriptions, self.truncate)),
                Text(format_year(artwork.date_start), justify="right"),
                Text(format_year(artwork.date_end), justify="right"),
                key=str(artwork.id),
            )

        self.move_cursor(row=min(cursor_row, len(items) - 1), animate=False)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """
        Forward row selection (Enter / click) as a toggle request
        """
        event.stop()
        if event.row_key.value != "empty":
            self.post_message(self.RowToggled(event.row_key.value))
