"""Protocol definitions for data sources.

Concrete providers (rate feeds, county tax lookups) live outside this
repository; the engine only needs their resolved values.
"""

from typing import Protocol, runtime_checkable

from src.models.borrower import Location
from src.models.market import MarketData


@runtime_checkable
class MarketDataSource(Protocol):
    async def get_market_data(self, location: Location) -> MarketData | None:
        """Current rates, property tax rate and insurance for a location."""
        ...
