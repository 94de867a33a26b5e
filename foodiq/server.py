"""FastAPI server exposing restaurant search and details as JSON."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from foodiq.config import get_config, setup_logging
from foodiq.exceptions import MalformedRecordError, ProviderFailureError
from foodiq.services.restaurant_service import RestaurantService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan manager."""
    config = get_config()
    logger.info(
        f"Starting FoodIQ API on {config.server_host}:{config.server_port} "
        f"(provider: {config.data_provider})"
    )

    # Store service in app state for dependency injection
    _app.state.restaurant_service = RestaurantService(config)

    yield

    logger.info("Shutting down FoodIQ API")


app = FastAPI(
    title="FoodIQ API",
    description="Restaurant search and details for FoodIQ",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def get_restaurant_service(request: Request) -> RestaurantService:
    """Dependency to get the restaurant service from app state.

    Raises:
        HTTPException: If the service is not initialized
    """
    service = getattr(request.app.state, "restaurant_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Service not initialized yet")
    return service


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "foodiq-api"}


@app.get("/restaurants")
async def search_restaurants(
    term: str = Query("", description="Food type, e.g. pizza"),
    location: str = Query("", description="City or postal code"),
    limit: int | None = Query(None, ge=0, le=50, description="Maximum results"),
    service: RestaurantService = Depends(get_restaurant_service),
):
    """Search restaurants.

    Returns:
        {"restaurants": [...], "count": n} with camelCase records
    """
    try:
        restaurants = await service.search(term, location, limit)
    except ProviderFailureError as e:
        return JSONResponse(status_code=502, content={"error": e.message})

    return {
        "restaurants": [r.model_dump(mode="json", by_alias=True) for r in restaurants],
        "count": len(restaurants),
    }


@app.get("/restaurants/{business_id}")
async def get_restaurant(
    business_id: str,
    service: RestaurantService = Depends(get_restaurant_service),
):
    """Get one restaurant's details."""
    try:
        restaurant = await service.get_by_id(business_id)
    except ProviderFailureError as e:
        return JSONResponse(status_code=502, content={"error": e.message})
    except MalformedRecordError:
        logger.exception(f"Malformed record for {business_id}")
        return JSONResponse(
            status_code=422,
            content={"error": "Restaurant data is incomplete."},
        )

    if restaurant is None:
        return JSONResponse(
            status_code=404,
            content={"error": "Restaurant not found"},
        )
    return restaurant.model_dump(mode="json", by_alias=True)


def run_server():
    """Run the FastAPI server using uvicorn."""
    setup_logging()
    config = get_config()

    uvicorn.run(
        "foodiq.server:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    run_server()
