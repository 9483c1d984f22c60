# collection_browser/services/artic_client.py

import logging
from typing import Any, Dict, Optional

from curl_cffi import requests

from collection_browser.errors import DecodeError, TransportError
from collection_browser.models.artwork import Artwork
from collection_browser.models.pagination import PageResult, PaginationMeta

logger = logging.getLogger(__name__)

# --- Constants (overridden by the "api" config section) ---
DEFAULT_BASE_URL = "https://api.artic.edu/api/v1/artworks"
DEFAULT_FIELDS = "id,title,place_of_origin,artist_display,inscriptions,date_start,date_end"
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_IMPERSONATE_BROWSER = "chrome110"


def decode_page(payload: Any, page_size: int) -> PageResult[Artwork]:
    """
    Turn an artworks API payload into a PageResult.

    Raises:
        DecodeError: if the payload does not have the expected shape
    """
    if not isinstance(payload, dict):
        raise DecodeError(f"Unexpected response type: {type(payload).__name__}")

    rows = payload.get("data")
    meta = payload.get("pagination")
    if not isinstance(rows, list) or not isinstance(meta, dict):
        raise DecodeError("Response is missing 'data' or 'pagination'")

    try:
        items = tuple(Artwork.from_api(row) for row in rows)
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError(f"Malformed artwork record: {e}") from e

    try:
        pagination = PaginationMeta(
            current_page=int(meta["current_page"]),
            total_pages=int(meta["total_pages"]),
            total_count=int(meta["total"]),
            page_size=int(meta.get("limit", page_size)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError(f"Malformed pagination block: {e}") from e

    return PageResult(items=items, pagination=pagination)


class ArticClient:
    """Async paging client for the Art Institute of Chicago artworks endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        fields: str = DEFAULT_FIELDS,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        impersonate: str = DEFAULT_IMPERSONATE_BROWSER,
        session: Optional[requests.AsyncSession] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Collection endpoint
            fields: Comma separated field list requested from the API
            timeout: Request timeout in seconds
            impersonate: Browser profile curl_cffi should impersonate
            session: Pre-built AsyncSession; one is created lazily otherwise
        """
        self.base_url = base_url
        self.fields = fields
        self.timeout = timeout
        self.impersonate = impersonate
        self._session = session

    @classmethod
    def from_config(cls, api_config: Dict[str, Any]) -> "ArticClient":
        return cls(
            api_config.get("base_url", DEFAULT_BASE_URL),
            fields=api_config.get("fields", DEFAULT_FIELDS),
            timeout=api_config.get("timeout", DEFAULT_TIMEOUT_SECONDS),
            impersonate=api_config.get("impersonate", DEFAULT_IMPERSONATE_BROWSER),
        )

    def _get_session(self) -> requests.AsyncSession:
        if self._session is None:
            self._session = requests.AsyncSession(impersonate=self.impersonate, timeout=self.timeout)
        return self._session

    async def fetch_page(self, page: int, page_size: int) -> PageResult[Artwork]:
        """
        Fetch one page of artworks.

        Raises:
            TransportError: network failure or a non-2xx status
            DecodeError: the body is not the expected JSON document
        """
        params = {"page": page, "limit": page_size, "fields": self.fields}
        logger.info(f"Fetching {self.base_url} page={page} limit={page_size}")

        try:
            response = await self._get_session().get(self.base_url, params=params)
        except requests.RequestsError as e:
            raise TransportError(f"Request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"Failed to fetch page {page}. Status: {response.status_code}")
            raise TransportError(f"Request failed: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {e}") from e

        return decode_page(payload, page_size)

    async def aclose(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None
