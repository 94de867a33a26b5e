"""Command-line interface for FoodIQ restaurant discovery."""

import asyncio
import logging
import re
import sys

from foodiq.config import Config, get_config, setup_logging
from foodiq.models import RestaurantDetail, RestaurantSummary
from foodiq.services.restaurant_service import RestaurantService
from foodiq.services.search_session import SearchSession

logger = logging.getLogger(__name__)

DETAILS_COMMAND = re.compile(r"^(?:details|d)\s+(\d+)$", re.IGNORECASE)


def format_card(index: int, restaurant: RestaurantSummary) -> str:
    """Render a search result as a short text card."""
    lines = [f"{index}. {restaurant.name}"]

    rating = f"{restaurant.rating:.1f}★ ({restaurant.review_count} reviews)"
    lines.append(f"   {rating}  {restaurant.price}")

    if restaurant.categories:
        lines.append(f"   {', '.join(restaurant.categories)}")
    if restaurant.address:
        lines.append(f"   {restaurant.address}")
    if restaurant.distance:
        lines.append(f"   {restaurant.distance} mi away")
    if restaurant.is_closed:
        lines.append("   Permanently closed")
    return "\n".join(lines)


def format_details(restaurant: RestaurantDetail) -> str:
    """Render the details view of a restaurant."""
    lines = [
        "=" * 60,
        restaurant.name,
        "=" * 60,
        f"Rating: {restaurant.rating:.1f}★ ({restaurant.review_count} reviews)",
        f"Price: {restaurant.price}",
    ]
    if restaurant.address:
        lines.append(f"Address: {restaurant.address}")
    if restaurant.phone:
        lines.append(f"Phone: {restaurant.phone}")
    lines.append(f"Hours: {restaurant.hours}")

    services = [
        label
        for label, offered in (
            ("Delivery", restaurant.delivery),
            ("Pickup", restaurant.pickup),
            ("Reservations", restaurant.reservations),
        )
        if offered
    ]
    lines.append(f"Services: {', '.join(services) if services else 'Dine-in only'}")

    if restaurant.specialties:
        lines.append(f"Specialties: {restaurant.specialties}")
    if restaurant.photos:
        lines.append(f"Photos: {len(restaurant.photos)}")
    if restaurant.url:
        lines.append(f"More info: {restaurant.url}")
    return "\n".join(lines)


class FoodIQCLI:
    """Interactive terminal client for searching restaurants."""

    def __init__(self, config: Config | None = None) -> None:
        """Initialize the CLI."""
        self.config = config or get_config()
        setup_logging(self.config)

        self.session = SearchSession(RestaurantService(self.config))
        logger.info("FoodIQ CLI initialized")

        self._display_config_status()

    def _display_config_status(self) -> None:
        """Display configuration status to the user."""
        print("\n" + "=" * 60)
        print("FOODIQ - Smart Food Discovery")
        print("\n" + "=" * 60)
        print(f"data provider: {self.config.data_provider}")
        print(f"default location: {self.config.default_location}")
        print("\n" + "=" * 60 + "\n")

    def run(self) -> None:
        """Run the CLI application."""
        print("Search for your favorite food or cuisine to discover restaurants.\n")
        print("Examples:")
        print('  "pizza" then "New York"')
        print('  "vegan" then "90210"')
        print('  "details 2" to open the second result\n')
        print("Type 'quit' or 'exit' to end the session.\n")

        while True:
            try:
                user_input = input("\nFood type: ").strip()

                if user_input.lower() in ["quit", "exit", "q"]:
                    print("\nThank you for using FoodIQ. Goodbye!")
                    break

                match = DETAILS_COMMAND.match(user_input)
                if match:
                    self._show_details(int(match.group(1)))
                    continue

                location = input(f"Location [{self.config.default_location}]: ").strip()
                if not user_input and not location:
                    print("Please enter a food type or location")
                    continue

                self._search(user_input, location)

            except (KeyboardInterrupt, EOFError):
                print("\n\nExiting FoodIQ. Goodbye!")
                break
            except Exception as e:
                logger.error(f"Unexpected error: {e}", exc_info=True)
                print("\n⚠ Something went wrong. Please try again.")

    def _search(self, term: str, location: str) -> None:
        """Run a search and print the result cards."""
        print("\nFinding restaurants...\n")
        state = asyncio.run(self.session.submit(term, location))
        if state is None:
            return

        if state.error:
            print(f"😕 {state.error}")
            return

        for index, restaurant in enumerate(state.restaurants, start=1):
            print(format_card(index, restaurant))
            print()

    def _show_details(self, position: int) -> None:
        """Print the details of the result at a 1-based position."""
        restaurants = self.session.state.restaurants
        if not 1 <= position <= len(restaurants):
            print(f"No result number {position}. Run a search first.")
            return

        summary = restaurants[position - 1]
        detail_state = asyncio.run(self.session.open_details(summary.id))
        if detail_state is None:
            return

        if detail_state.restaurant is None:
            print(f"😕 {detail_state.error}")
            return
        print(format_details(detail_state.restaurant))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        config = get_config()
    except Exception as e:
        print(f"Configuration error: {e}")
        print("\nCheck your environment variables or .env file, e.g.:")
        print("  DATA_PROVIDER=yelp")
        print("  YELP_API_KEY=your_key_here")
        sys.exit(1)

    cli = FoodIQCLI(config)
    cli.run()


if __name__ == "__main__":
    main()
