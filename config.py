"""Application configuration loaded from environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()

# LiteAPI (empty key serves static sample hotels)
LITEAPI_KEY: str = os.environ.get("LITEAPI_KEY", "")
LITEAPI_BASE_URL: str = os.environ.get("LITEAPI_BASE_URL", "https://api.liteapi.travel/v3.0")
LITEAPI_REQUEST_TIMEOUT: float = float(os.environ.get("LITEAPI_REQUEST_TIMEOUT", "30.0"))

# Nearby-hotel search
HOTEL_CACHE_TTL_SECONDS: float = float(os.environ.get("HOTEL_CACHE_TTL_SECONDS", "1800"))
HOTEL_REFETCH_DISTANCE_M: float = float(os.environ.get("HOTEL_REFETCH_DISTANCE_M", "10000"))
DEFAULT_SEARCH_RADIUS_M: int = int(os.environ.get("DEFAULT_SEARCH_RADIUS_M", "10000"))
MAX_HOTELS_PER_QUERY: int = int(os.environ.get("MAX_HOTELS_PER_QUERY", "50"))

# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
]
