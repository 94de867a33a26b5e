"""Tests for the FastAPI server."""

import pytest
from fastapi.testclient import TestClient

from foodiq.exceptions import MalformedRecordError, ProviderFailureError
from foodiq.server import app, get_restaurant_service
from foodiq.services.providers import LocalDatasetProvider, RestaurantProvider
from foodiq.services.restaurant_service import RestaurantService


class FailingProvider(RestaurantProvider):
    """Provider that fails every request with the given error."""

    name = "failing"

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def search(self, term, location, limit):
        raise self.error

    async def get_by_id(self, business_id):
        raise self.error


@pytest.fixture
def make_client(config):
    """Build a test client whose service uses the given provider."""

    def _make(provider: RestaurantProvider | None = None) -> TestClient:
        service = RestaurantService(config, provider=provider or LocalDatasetProvider(config))
        app.dependency_overrides[get_restaurant_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


class TestServer:
    """Tests for the HTTP endpoints."""

    def test_health(self, make_client):
        response = make_client().get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "foodiq-api"}

    def test_search(self, make_client):
        """Test searching returns camelCase records."""
        response = make_client().get("/restaurants", params={"term": "pizza"})

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        restaurant = data["restaurants"][0]
        assert restaurant["id"] == "joes-pizza-new-york"
        assert restaurant["reviewCount"] == 5420
        assert restaurant["isClosed"] is False
        assert restaurant["distance"] == "0.75"

    def test_search_limit(self, make_client):
        response = make_client().get("/restaurants", params={"limit": 2})

        assert response.json()["count"] == 2

    def test_search_invalid_limit(self, make_client):
        response = make_client().get("/restaurants", params={"limit": -1})

        assert response.status_code == 422

    def test_search_provider_failure(self, make_client):
        client = make_client(FailingProvider(ProviderFailureError()))

        response = client.get("/restaurants", params={"term": "pizza"})

        assert response.status_code == 502
        assert response.json() == {
            "error": "Failed to fetch restaurants. Please check your API key and try again."
        }

    def test_details(self, make_client):
        response = make_client().get("/restaurants/carbone-new-york")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Carbone"
        assert data["reservations"] is True
        assert data["hours"] == "Closed"
        assert data["phone"] == "(212) 254-3000"

    def test_details_not_found(self, make_client):
        response = make_client().get("/restaurants/nowhere")

        assert response.status_code == 404

    def test_details_malformed(self, make_client):
        client = make_client(FailingProvider(MalformedRecordError("no name")))

        response = client.get("/restaurants/broken")

        assert response.status_code == 422
        assert "no name" not in response.text

    def test_details_provider_failure(self, make_client):
        client = make_client(FailingProvider(ProviderFailureError("Failed to fetch restaurant details.")))

        response = client.get("/restaurants/any")

        assert response.status_code == 502
        assert response.json()["error"] == "Failed to fetch restaurant details."

    def test_service_not_initialized(self):
        """Test that requests fail cleanly before startup."""
        app.dependency_overrides.clear()
        response = TestClient(app).get("/restaurants")

        assert response.status_code == 503
