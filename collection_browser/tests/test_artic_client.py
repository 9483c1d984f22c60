import unittest
from unittest.mock import AsyncMock, Mock

from curl_cffi import requests

from ..errors import DecodeError, TransportError
from ..models.artwork import Artwork
from ..services.artic_client import DEFAULT_FIELDS, ArticClient, decode_page


def sample_payload():
    return {
        "pagination": {
            "total": 25,
            "limit": 12,
            "offset": 24,
            "total_pages": 3,
            "current_page": 3,
        },
        "data": [
            {
                "id": 27992,
                "title": "A Sunday on La Grande Jatte — 1884",
                "place_of_origin": "France",
                "artist_display": "Georges Seurat\nFrench, 1859-1891",
                "inscriptions": None,
                "date_start": 1884,
                "date_end": 1886,
            }
        ],
    }


class TestDecodePage(unittest.TestCase):
    def test_decodes_items_and_pagination(self):
        result = decode_page(sample_payload(), page_size=12)

        self.assertEqual(len(result.items), 1)
        artwork = result.items[0]
        self.assertIsInstance(artwork, Artwork)
        self.assertEqual(artwork.id, 27992)
        self.assertIsNone(artwork.inscriptions)
        self.assertEqual(artwork.date_end, 1886)

        meta = result.pagination
        self.assertEqual((meta.current_page, meta.total_pages, meta.total_count, meta.page_size), (3, 3, 25, 12))

    def test_missing_limit_falls_back_to_requested_size(self):
        payload = sample_payload()
        del payload["pagination"]["limit"]
        self.assertEqual(decode_page(payload, page_size=6).pagination.page_size, 6)

    def test_shape_errors(self):
        missing_data = sample_payload()
        del missing_data["data"]
        row_without_id = sample_payload()
        del row_without_id["data"][0]["id"]
        bad_meta = sample_payload()
        bad_meta["pagination"]["current_page"] = 0
        past_the_end = sample_payload()
        past_the_end["pagination"]["current_page"] = 4

        for payload in ([], missing_data, row_without_id, bad_meta, past_the_end):
            with self.subTest(payload=payload):
                with self.assertRaises(DecodeError):
                    decode_page(payload, page_size=12)


class TestArticClient(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.session = Mock()
        self.session.get = AsyncMock()
        self.session.close = AsyncMock()
        self.client = ArticClient("https://example.test/artworks", session=self.session)

    def _respond(self, status_code=200, payload=None, json_error=None):
        response = Mock(status_code=status_code)
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        self.session.get.return_value = response

    async def test_fetch_page_sends_paging_params(self):
        self._respond(payload=sample_payload())

        result = await self.client.fetch_page(3, 12)

        self.session.get.assert_awaited_once_with(
            "https://example.test/artworks",
            params={"page": 3, "limit": 12, "fields": DEFAULT_FIELDS},
        )
        self.assertEqual(result.pagination.current_page, 3)

    async def test_non_success_status_is_transport_error(self):
        self._respond(status_code=500)

        with self.assertRaises(TransportError) as ctx:
            await self.client.fetch_page(1, 12)
        self.assertEqual(str(ctx.exception), "Request failed: 500")

    async def test_curl_failure_is_transport_error(self):
        self.session.get.side_effect = requests.RequestsError("Could not resolve host")

        with self.assertRaises(TransportError):
            await self.client.fetch_page(1, 12)

    async def test_invalid_json_is_decode_error(self):
        self._respond(json_error=ValueError("Expecting value"))

        with self.assertRaises(DecodeError):
            await self.client.fetch_page(1, 12)

    async def test_aclose_closes_session_once(self):
        await self.client.aclose()
        await self.client.aclose()
        self.session.close.assert_awaited_once()

    def test_from_config(self):
        client = ArticClient.from_config({"base_url": "https://example.test/x", "timeout": 5})
        self.assertEqual(client.base_url, "https://example.test/x")
        self.assertEqual(client.timeout, 5)
        self.assertEqual(client.fields, DEFAULT_FIELDS)


if __name__ == "__main__":
    unittest.main()
