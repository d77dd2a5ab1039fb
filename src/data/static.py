"""Market data source serving configured fallback figures."""

import logging

from src.config import settings
from src.models.borrower import Location
from src.models.market import MarketData

logger = logging.getLogger(__name__)


class StaticMarketDataSource:
    """Same answer for every location. Used when no live provider is configured."""

    def __init__(self, market: MarketData | None = None):
        self.market = market or MarketData(
            conventional_interest_rate=settings.default_conventional_rate,
            fha_interest_rate=settings.default_fha_rate,
            property_tax_rate=settings.default_property_tax_rate,
            property_insurance_annual=settings.default_property_insurance,
        )

    async def get_market_data(self, location: Location) -> MarketData | None:
        logger.debug("Serving static market data for %s, %s", location.city, location.state)
        return self.market
