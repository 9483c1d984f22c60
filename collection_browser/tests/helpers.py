import asyncio

from ..models.artwork import Artwork
from ..models.pagination import PageResult, PaginationMeta


def artworks(*ids):
    return tuple(Artwork(id=i, title=f"Artwork {i}") for i in ids)


def make_page(page, page_size=3, total=9):
    start = (page - 1) * page_size + 1
    end = min(page * page_size, total)
    return PageResult(
        items=artworks(*range(start, end + 1)),
        pagination=PaginationMeta.from_counts(page, total, page_size),
    )


async def settle(rounds=5):
    """Let scheduled tasks run up to their next suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)


class ControlledSource:
    """Paging source whose responses are resolved by the test, in any order."""

    def __init__(self):
        self.pending = {}
        self.calls = []

    async def fetch_page(self, page, page_size):
        self.calls.append((page, page_size))
        future = asyncio.get_running_loop().create_future()
        self.pending[(page, page_size)] = future
        return await future

    def succeed(self, page, page_size, result):
        self.pending.pop((page, page_size)).set_result(result)

    def fail(self, page, page_size, error):
        self.pending.pop((page, page_size)).set_exception(error)
