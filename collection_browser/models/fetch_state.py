"""The four states a page fetch can be in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from collection_browser.models.pagination import PageResult


@dataclass(frozen=True, slots=True)
class Idle:
    status: ClassVar[str] = "idle"


@dataclass(frozen=True, slots=True)
class Loading:
    page: int
    page_size: int

    status: ClassVar[str] = "loading"


@dataclass(frozen=True, slots=True)
class Success:
    result: PageResult

    status: ClassVar[str] = "success"


@dataclass(frozen=True, slots=True)
class Error:
    message: str

    status: ClassVar[str] = "error"


FetchState = Union[Idle, Loading, Success, Error]
