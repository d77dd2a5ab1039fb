"""Market data routes."""

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_market_source
from src.api.schemas import LocationRequest, MarketDataResponse
from src.data.base import MarketDataSource

router = APIRouter(prefix="/api/v1/market", tags=["market"])


@router.post("/lookup", response_model=MarketDataResponse)
async def lookup_market_data(
    req: LocationRequest,
    source: MarketDataSource = Depends(get_market_source),
):
    """Rates, tax rate and insurance for a location."""
    location = req.to_location()
    if not location.is_complete:
        raise HTTPException(status_code=422, detail="City, state and ZIP code are required")

    market = await source.get_market_data(location)
    if market is None:
        raise HTTPException(status_code=404, detail="No market data for this location")

    return MarketDataResponse(
        conventional_interest_rate=market.conventional_interest_rate,
        fha_interest_rate=market.fha_interest_rate,
        property_tax_rate=market.property_tax_rate,
        property_insurance_annual=market.property_insurance_annual,
    )
