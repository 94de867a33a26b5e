"""Tests for the Yelp Fusion provider using a mocked transport."""

import json

import httpx
import pytest

from foodiq.exceptions import (
    DETAILS_FAILED_MESSAGE,
    SEARCH_FAILED_MESSAGE,
    MalformedRecordError,
    ProviderFailureError,
)
from foodiq.services.providers import YelpProvider


def mock_client(handler) -> httpx.AsyncClient:
    """Create an AsyncClient whose requests are answered by handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestYelpSearch:
    """Tests for YelpProvider.search."""

    @pytest.mark.asyncio
    async def test_request_shape(self, config, full_business):
        """Test URL, auth header and query parameters of a search."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"businesses": [full_business], "total": 1})

        async with mock_client(handler) as client:
            provider = YelpProvider(config, client=client)
            await provider.search("french", "San Francisco", 10)

        request = seen[0]
        assert request.method == "GET"
        assert str(request.url).startswith("https://api.yelp.test/v3/businesses/search")
        assert request.headers["Authorization"] == "Bearer test-key"
        assert request.url.params["term"] == "french"
        assert request.url.params["location"] == "San Francisco"
        assert request.url.params["limit"] == "10"
        assert request.url.params["sort_by"] == "rating"

    @pytest.mark.asyncio
    async def test_results_are_normalized(self, config, full_business):
        """Test that a 3218.68 meter distance becomes 2.00 miles."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"businesses": [full_business]})

        async with mock_client(handler) as client:
            results = await YelpProvider(config, client=client).search("french", "SF", 20)

        assert len(results) == 1
        assert results[0].distance == "2.00"
        assert results[0].address == "800 N Point St, San Francisco, CA 94109"
        assert results[0].categories == ["French", "American (New)"]

    @pytest.mark.asyncio
    async def test_provider_order_is_kept(self, config):
        """Test that rating-sorted provider order is not re-sorted."""
        businesses = [
            {"id": "b", "name": "B", "rating": 4.0},
            {"id": "a", "name": "A", "rating": 5.0},
        ]

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"businesses": businesses})

        async with mock_client(handler) as client:
            results = await YelpProvider(config, client=client).search("", "SF", 20)

        assert [r.id for r in results] == ["b", "a"]

    @pytest.mark.asyncio
    async def test_malformed_businesses_dropped(self, config, full_business):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"businesses": [{"name": "No Id"}, full_business]}
            )

        async with mock_client(handler) as client:
            results = await YelpProvider(config, client=client).search("", "SF", 20)

        assert [r.id for r in results] == ["gary-danko-san-francisco"]

    @pytest.mark.asyncio
    async def test_limit_capped_at_yelp_maximum(self, config):
        """Test that limits above Yelp's maximum are capped, not rejected."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"businesses": []})

        async with mock_client(handler) as client:
            assert await YelpProvider(config, client=client).search("x", "SF", 100) == []

        assert seen[0].url.params["limit"] == "50"

    @pytest.mark.asyncio
    async def test_zero_limit_makes_no_request(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        async with mock_client(handler) as client:
            assert await YelpProvider(config, client=client).search("x", "SF", 0) == []

    @pytest.mark.asyncio
    async def test_network_error(self, config):
        """Test that transport errors collapse to a generic failure."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with mock_client(handler) as client:
            with pytest.raises(ProviderFailureError) as exc_info:
                await YelpProvider(config, client=client).search("x", "SF", 20)

        assert exc_info.value.message == SEARCH_FAILED_MESSAGE
        assert "refused" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_error_status(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                401, json={"error": {"code": "TOKEN_INVALID", "description": "bad"}}
            )

        async with mock_client(handler) as client:
            with pytest.raises(ProviderFailureError, match="check your API key"):
                await YelpProvider(config, client=client).search("x", "SF", 20)

    @pytest.mark.asyncio
    async def test_unparseable_body(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        async with mock_client(handler) as client:
            with pytest.raises(ProviderFailureError):
                await YelpProvider(config, client=client).search("x", "SF", 20)

    @pytest.mark.asyncio
    async def test_missing_businesses_key(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=json.dumps({"total": 0}).encode())

        async with mock_client(handler) as client:
            with pytest.raises(ProviderFailureError):
                await YelpProvider(config, client=client).search("x", "SF", 20)

    @pytest.mark.asyncio
    async def test_missing_credential(self, config):
        """Test that no request is sent without an API key."""
        config = config.model_copy(update={"yelp_api_key": None})

        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        async with mock_client(handler) as client:
            with pytest.raises(ProviderFailureError):
                await YelpProvider(config, client=client).search("x", "SF", 20)


class TestYelpGetById:
    """Tests for YelpProvider.get_by_id."""

    @pytest.mark.asyncio
    async def test_detail(self, config, full_business):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=full_business)

        async with mock_client(handler) as client:
            detail = await YelpProvider(config, client=client).get_by_id(
                "gary-danko-san-francisco"
            )

        assert seen[0].url.path == "/v3/businesses/gary-danko-san-francisco"
        assert seen[0].headers["Authorization"] == "Bearer test-key"
        assert detail.phone == "(415) 749-2060"
        assert detail.hours == "Open Now"
        assert detail.reservations is True

    @pytest.mark.asyncio
    async def test_not_found(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": {"code": "BUSINESS_NOT_FOUND"}})

        async with mock_client(handler) as client:
            assert await YelpProvider(config, client=client).get_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_server_error(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        async with mock_client(handler) as client:
            with pytest.raises(ProviderFailureError) as exc_info:
                await YelpProvider(config, client=client).get_by_id("any")

        assert exc_info.value.message == DETAILS_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_non_object_body(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["not", "a", "business"])

        async with mock_client(handler) as client:
            with pytest.raises(ProviderFailureError):
                await YelpProvider(config, client=client).get_by_id("any")

    @pytest.mark.asyncio
    async def test_malformed_record(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"id": "nameless"})

        async with mock_client(handler) as client:
            with pytest.raises(MalformedRecordError):
                await YelpProvider(config, client=client).get_by_id("nameless")
