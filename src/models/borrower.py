"""Borrower profile and loan parameter inputs for the affordability engine."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

logger = logging.getLogger(__name__)


class LoanType(Enum):
    CONVENTIONAL = "conventional"
    FHA = "fha"

    @property
    def alternate(self) -> "LoanType":
        return LoanType.FHA if self is LoanType.CONVENTIONAL else LoanType.CONVENTIONAL


class FactorKey(Enum):
    """Compensating factor categories, keyed the way saved snapshots store them."""
    CASH_RESERVES = "cashReserves"
    RESIDUAL_INCOME = "residualIncome"
    CREDIT_HISTORY = "creditHistory"
    HOUSING_PAYMENT_INCREASE = "housingPaymentIncrease"
    EMPLOYMENT_HISTORY = "employmentHistory"
    CREDIT_UTILIZATION = "creditUtilization"
    DOWN_PAYMENT = "downPayment"
    NON_HOUSING_DTI = "nonHousingDTI"


# Derived from FICO and debts; never taken from the borrower's selections
COMPUTED_FACTORS = frozenset({FactorKey.CREDIT_HISTORY.value, FactorKey.NON_HOUSING_DTI.value})


@dataclass(frozen=True)
class StructuredTiers:
    """One selected tier per factor category, e.g. {"cashReserves": "6+ months"}."""
    tiers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class LegacyFactors:
    """Older input shape: a bare list of factor names such as ["reserves"]."""
    names: frozenset[str] = frozenset()


CompensatingFactors = StructuredTiers | LegacyFactors


def coerce_factors(raw) -> CompensatingFactors:
    """Convert a persisted or request-supplied factor payload into the tagged union."""
    if isinstance(raw, (StructuredTiers, LegacyFactors)):
        return raw
    if raw is None:
        return StructuredTiers()
    if isinstance(raw, dict):
        return StructuredTiers(tiers={str(k): str(v) for k, v in raw.items() if v is not None})
    if isinstance(raw, (list, tuple, set, frozenset)):
        return LegacyFactors(names=frozenset(str(name) for name in raw))
    logger.warning("Unsupported compensating factor payload %s ignored", type(raw).__name__)
    return StructuredTiers()


@dataclass(frozen=True)
class BorrowerProfile:
    annual_income: Decimal
    fico_score: int
    monthly_debts: Decimal = Decimal("0")  # Sum of itemized recurring obligations
    selected_factors: CompensatingFactors = field(default_factory=StructuredTiers)

    @property
    def monthly_income(self) -> Decimal:
        return self.annual_income / 12


@dataclass(frozen=True)
class LoanParameters:
    loan_type: LoanType
    ltv: Decimal  # Percent, e.g. Decimal("80")
    base_interest_rate: Decimal | None = None  # Market rate, percent
    property_tax_rate: Decimal | None = None  # Annual percent of home value
    property_insurance_annual: Decimal | None = None
    upfront_mip: Decimal | None = None  # FHA only
    ongoing_mip: Decimal | None = None  # FHA only, annual percent
    term_years: int = 30

    @property
    def down_payment_percent(self) -> Decimal:
        return Decimal("100") - self.ltv


@dataclass(frozen=True)
class Location:
    city: str = ""
    state: str = ""
    zip_code: str = ""

    @property
    def is_complete(self) -> bool:
        return all(part.strip() for part in (self.city, self.state, self.zip_code))
