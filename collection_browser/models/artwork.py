"""Domain model for an Artwork record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _year(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True, slots=True)
class Artwork:
    id: int
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    # ---------- mappings ----------
    @classmethod
    def from_api(cls, row: Dict[str, Any]) -> "Artwork":
        """
        Build an `Artwork` from one entry of the API `data` array.

        Raises:
            KeyError: if the row carries no id
            ValueError: if the id is not an integer
        """
        return cls(
            id=int(row["id"]),
            title=_text(row.get("title")),
            place_of_origin=_text(row.get("place_of_origin")),
            artist_display=_text(row.get("artist_display")),
            inscriptions=_text(row.get("inscriptions")),
            date_start=_year(row.get("date_start")),
            date_end=_year(row.get("date_end")),
        )
