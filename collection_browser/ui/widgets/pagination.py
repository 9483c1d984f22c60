"""
Pagination widget for navigating through the collection
"""

from typing import Optional, Sequence

from textual.containers import Container
from textual.message import Message
from textual.widgets import Button, Input, Label, Select

from collection_browser.core.paging import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS, PageView
from collection_browser.utils.formatters import format_page_indicator, format_range


class Pagination(Container):
    """
    Record range, page size selector, go-to box and first/prev/next/last buttons
    """

    DEFAULT_CSS = """
    Pagination {
        layout: horizontal;
        height: 3;
        content-align: center middle;
    }

    Pagination > Button {
        min-width: 5;
        margin: 0 1;
    }

    Pagination > #range-label {
        min-width: 22;
        padding: 1 1;
    }

    Pagination > #page-size {
        width: 12;
    }

    Pagination > #jump-input {
        width: 10;
    }

    Pagination > #page-indicator {
        min-width: 15;
        padding: 1 1;
    }
    """

    class Navigate(Message):
        """Nav button pressed; `direction` is first, prev, next or last"""
        def __init__(self, direction: str) -> None:
            super().__init__()
            self.direction = direction

    class PageSizeChanged(Message):
        """Page size changed message"""
        def __init__(self, page_size: int) -> None:
            super().__init__()
            self.page_size = page_size

    class JumpRequested(Message):
        """Go-to box submitted; `text` is the raw entry"""
        def __init__(self, text: str) -> None:
            super().__init__()
            self.text = text

    def __init__(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_size_options: Sequence[int] = PAGE_SIZE_OPTIONS,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """
        Initialize the Pagination widget

        Args:
            page_size: Initially selected page size
            page_size_options: Choices offered in the page size selector
            id: Optional widget ID
            classes: Optional CSS classes
        """
        super().__init__(id=id, classes=classes)
        options = list(page_size_options)
        if page_size not in options:
            options = sorted(options + [page_size])
        self._page_size_options = options
        self._page_size = page_size
        self._view: Optional[PageView] = None
        self._nav: Optional[PageView] = None

    def compose(self):
        """Create child widgets"""
        yield Label("No records", id="range-label")
        yield Select(
            [(f"{n} / page", n) for n in self._page_size_options],
            value=self._page_size,
            allow_blank=False,
            id="page-size",
        )
        yield Input(placeholder="Go to", restrict=r"[0-9]*", id="jump-input")
        yield Button("« First", id="first-page", classes="page-button")
        yield Button("< Prev", id="prev-page", classes="page-button")
        yield Label(format_page_indicator(None), id="page-indicator", classes="page-indicator")
        yield Button("Next >", id="next-page", classes="page-button")
        yield Button("Last »", id="last-page", classes="page-button")

    def on_mount(self) -> None:
        self.update_view(self._view, self._page_size, self._nav)

    def update_view(
        self,
        view: Optional[PageView],
        page_size: int,
        nav: Optional[PageView] = None,
    ) -> None:
        """
        Update pagination with new page information

        Args:
            view: Derived paging values of the page on screen, None before the first load
            page_size: Page size currently requested
            nav: Paging values of the requested page, used for the buttons; defaults to `view`
        """
        self._view = view
        self._nav = nav = nav if nav is not None else view
        self._page_size = page_size

        self.query_one("#range-label", Label).update(format_range(view))
        self.query_one("#page-indicator", Label).update(format_page_indicator(view))

        select = self.query_one("#page-size", Select)
        if select.value != page_size:
            select.value = page_size

        jump_input = self.query_one("#jump-input", Input)
        if view is not None:
            jump_input.placeholder = str(view.current_page)

        # Disable buttons where there is nowhere to go
        first_btn = self.query_one("#first-page", Button)
        prev_btn = self.query_one("#prev-page", Button)
        next_btn = self.query_one("#next-page", Button)
        last_btn = self.query_one("#last-page", Button)

        first_btn.disabled = prev_btn.disabled = nav is None or nav.is_first
        next_btn.disabled = last_btn.disabled = nav is None or nav.is_last

    def focus_jump(self) -> None:
        self.query_one("#jump-input", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle pagination button presses"""
        # the target page is picked by the session at handling time
        direction = {
            "first-page": "first",
            "prev-page": "prev",
            "next-page": "next",
            "last-page": "last",
        }.get(event.button.id)

        if direction is not None:
            self.post_message(self.Navigate(direction))

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "page-size" and isinstance(event.value, int):
            if event.value != self._page_size:
                self.post_message(self.PageSizeChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle go-to submission (Enter key)"""
        if event.input.id == "jump-input":
            text = event.value
            event.input.value = ""
            self.post_message(self.JumpRequested(text))
