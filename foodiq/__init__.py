"""FoodIQ - smart food discovery."""

__version__ = "0.1.0"
