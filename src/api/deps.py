"""FastAPI dependency injection."""

from src.data.base import MarketDataSource
from src.data.cache import MarketDataCache
from src.data.static import StaticMarketDataSource


def get_market_source() -> MarketDataSource:
    return MarketDataCache(StaticMarketDataSource())
