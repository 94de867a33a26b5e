"""Shared fixtures for FoodIQ tests."""

import pytest

from foodiq.config import Config


@pytest.fixture
def config():
    """Configuration with no simulated latency and a test credential."""
    return Config(
        _env_file=None,
        data_provider="mock",
        yelp_api_key="test-key",
        yelp_api_base_url="https://api.yelp.test/v3",
        default_location="New York",
        default_limit=20,
        mock_search_delay=0,
        mock_detail_delay=0,
    )


@pytest.fixture
def tonys_pizza():
    """The single-restaurant dataset with plain-string category labels."""
    return {
        "id": "r1",
        "name": "Tony's Pizza",
        "rating": 4.5,
        "categories": ["Pizza", "Italian"],
    }


@pytest.fixture
def full_business():
    """A Yelp business record with every field the app reads."""
    return {
        "id": "gary-danko-san-francisco",
        "name": "Gary Danko",
        "image_url": "https://images.example.com/gary-danko.jpg",
        "url": "https://www.yelp.com/biz/gary-danko-san-francisco",
        "rating": 4.5,
        "review_count": 5296,
        "price": "$$$$",
        "phone": "+14157492060",
        "display_phone": "(415) 749-2060",
        "location": {
            "address1": "800 N Point St",
            "city": "San Francisco",
            "state": "CA",
            "zip_code": "94109",
        },
        "coordinates": {"latitude": 37.80587, "longitude": -122.42058},
        "categories": [
            {"alias": "french", "title": "French"},
            {"alias": "newamerican", "title": "American (New)"},
        ],
        "distance": 3218.68,
        "is_closed": False,
        "transactions": ["pickup", "restaurant_reservation"],
        "photos": [
            "https://images.example.com/gary-danko-1.jpg",
            "https://images.example.com/gary-danko-2.jpg",
        ],
        "hours": [
            {"hours_type": "REGULAR", "is_open_now": True},
            {"hours_type": "HAPPY_HOUR", "is_open_now": False},
        ],
    }
