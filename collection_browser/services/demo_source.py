# collection_browser/services/demo_source.py

import asyncio
import logging
import random
from typing import Callable, Iterable, List, Optional, Sequence, Union

from collection_browser.errors import TransportError
from collection_browser.models.artwork import Artwork
from collection_browser.models.pagination import PageResult, PaginationMeta

logger = logging.getLogger(__name__)

Latency = Union[float, Callable[[int], float]]


def generate_artworks(count: int, seed: int = 0) -> List[Artwork]:
    """Build `count` deterministic sample artworks."""
    rng = random.Random(seed)
    titles = ["Study of Light", "Harbor at Dusk", "Untitled", "Portrait of a Woman", "Still Life with Pears"]
    origins = ["France", "Japan", "United States", "Netherlands", None]
    artists = ["Anonymous", "Claude Monet\nFrench, 1840-1926", "Katsushika Hokusai", None]

    artworks = []
    for i in range(1, count + 1):
        start = rng.randint(1500, 1990)
        artworks.append(
            Artwork(
                id=i,
                title=f"{rng.choice(titles)} #{i}",
                place_of_origin=rng.choice(origins),
                artist_display=rng.choice(artists),
                inscriptions=None if i % 3 else f"Signed lower right, {start}",
                date_start=start,
                date_end=start + rng.randint(0, 5),
            )
        )
    return artworks


class DemoSource:
    """In-memory paging source, used offline and in tests."""

    def __init__(
        self,
        items: Optional[Sequence[Artwork]] = None,
        *,
        latency: Latency = 0.0,
        fail_pages: Iterable[int] = (),
    ):
        """
        Args:
            items: Records to serve; 60 generated artworks by default
            latency: Seconds to wait per fetch, or a callable `page -> seconds`
            fail_pages: Pages that raise TransportError instead of answering
        """
        self.items = list(items) if items is not None else generate_artworks(60)
        self.latency = latency
        self.fail_pages = set(fail_pages)
        self.calls: List[tuple] = []

    async def fetch_page(self, page: int, page_size: int) -> PageResult[Artwork]:
        self.calls.append((page, page_size))

        delay = self.latency(page) if callable(self.latency) else self.latency
        if delay:
            await asyncio.sleep(delay)

        if page in self.fail_pages:
            logger.warning(f"Simulated failure for page {page}")
            raise TransportError("Request failed: 503")

        start = (page - 1) * page_size
        chunk = tuple(self.items[start:start + page_size])
        meta = PaginationMeta.from_counts(page, len(self.items), page_size)
        return PageResult(items=chunk, pagination=meta)
