"""Loan parameters for the engine, built from resolved market data."""

from decimal import Decimal

from src.engine.mortgage_insurance import fha_mip_rates
from src.models.borrower import LoanParameters, LoanType
from src.models.market import MarketData

CONVENTIONAL_LTV_RANGE = (Decimal("80"), Decimal("97"))
FHA_LTV_RANGE = (Decimal("90"), Decimal("96.5"))


def ltv_range(loan_type: LoanType) -> tuple[Decimal, Decimal]:
    """Selectable LTV range per loan type. The engine itself accepts any LTV."""
    return FHA_LTV_RANGE if loan_type is LoanType.FHA else CONVENTIONAL_LTV_RANGE


def build_loan_parameters(
    market: MarketData,
    loan_type: LoanType,
    ltv: Decimal,
    term_years: int = 30,
    property_insurance_override: Decimal | None = None,
) -> LoanParameters:
    """Pick the market rate for the loan type and attach FHA MIP quotes.

    Missing market values stay None; validation reports them before the
    engine runs.
    """
    upfront_mip = None
    ongoing_mip = None
    if loan_type is LoanType.FHA:
        mip = fha_mip_rates(ltv, term_years)
        upfront_mip = mip.upfront_mip_percent
        ongoing_mip = mip.annual_mip_percent

    insurance = property_insurance_override
    if insurance is None:
        insurance = market.property_insurance_annual

    return LoanParameters(
        loan_type=loan_type,
        ltv=ltv,
        base_interest_rate=market.rate_for(loan_type),
        property_tax_rate=market.property_tax_rate,
        property_insurance_annual=insurance,
        upfront_mip=upfront_mip,
        ongoing_mip=ongoing_mip,
        term_years=term_years,
    )
