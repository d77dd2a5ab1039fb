"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from src.models.borrower import (
    BorrowerProfile,
    LoanParameters,
    LoanType,
    Location,
    coerce_factors,
)


# ---- Request schemas ----

class BorrowerRequest(BaseModel):
    annual_income: Decimal = Field(Decimal("0"), ge=0)
    fico_score: int = Field(..., ge=300, le=850)
    monthly_debts: Decimal = Field(Decimal("0"), ge=0, description="Sum of itemized monthly debts")
    # Structured {"cashReserves": "6+ months", ...} or legacy ["reserves", ...]
    compensating_factors: dict[str, str | None] | list[str] | None = None

    def to_profile(self) -> BorrowerProfile:
        return BorrowerProfile(
            annual_income=self.annual_income,
            fico_score=self.fico_score,
            monthly_debts=self.monthly_debts,
            selected_factors=coerce_factors(self.compensating_factors),
        )


class LocationRequest(BaseModel):
    city: str = ""
    state: str = ""
    zip_code: str = ""

    def to_location(self) -> Location:
        return Location(city=self.city, state=self.state, zip_code=self.zip_code)


class LoanRequest(BaseModel):
    loan_type: LoanType = LoanType.CONVENTIONAL
    ltv: Decimal = Field(..., gt=0, le=100, description="Loan-to-value, percent")
    base_interest_rate: Decimal | None = Field(None, description="Market rate, percent")
    property_tax_rate: Decimal | None = Field(None, description="Annual percent of home value")
    property_insurance_annual: Decimal | None = None
    upfront_mip: Decimal | None = None
    ongoing_mip: Decimal | None = None
    term_years: int = Field(30, gt=0, le=40)

    def to_loan(self) -> LoanParameters:
        return LoanParameters(
            loan_type=self.loan_type,
            ltv=self.ltv,
            base_interest_rate=self.base_interest_rate,
            property_tax_rate=self.property_tax_rate,
            property_insurance_annual=self.property_insurance_annual,
            upfront_mip=self.upfront_mip,
            ongoing_mip=self.ongoing_mip,
            term_years=self.term_years,
        )


class AffordabilityRequest(BaseModel):
    borrower: BorrowerRequest
    loan: LoanRequest
    location: LocationRequest = LocationRequest()


class QuoteRequest(BaseModel):
    """Affordability with loan pricing filled in from market data for the location."""
    borrower: BorrowerRequest
    location: LocationRequest
    loan_type: LoanType = LoanType.CONVENTIONAL
    ltv: Decimal = Field(..., gt=0, le=100)
    term_years: int | None = Field(None, gt=0, le=40)
    property_insurance_annual: Decimal | None = None


class RateRequest(BaseModel):
    base_interest_rate: Decimal = Field(..., ge=0)
    fico_score: int = Field(..., ge=300, le=850)
    ltv: Decimal = Field(..., gt=0, le=100)
    loan_type: LoanType = LoanType.CONVENTIONAL


# ---- Response schemas ----

class DTIAdjustmentResponse(BaseModel):
    source: str
    points: Decimal
    detail: str = ""


class DTIStatusResponse(BaseModel):
    value: Decimal
    status: str
    message: str
    help_text: str


class FinancialDetailsResponse(BaseModel):
    monthly_income: Decimal
    max_monthly_debt_payment: Decimal
    available_for_mortgage: Decimal
    strong_factor_count: int
    loan_amount: Decimal
    mortgage_insurance_rate: Decimal
    upfront_mip_amount: Decimal
    front_end_dti: Decimal
    back_end_dti: Decimal


class ScenarioResponse(BaseModel):
    name: str
    description: str
    loan_type: LoanType
    fico_change: int
    ltv_change: Decimal
    max_home_price: Decimal
    monthly_payment: Decimal
    increase: Decimal
    adjusted_interest_rate: Decimal
    max_dti: Decimal
    eligible: bool


class AffordabilityResponse(BaseModel):
    max_dti: Decimal
    adjusted_interest_rate: Decimal
    max_home_price: Decimal
    monthly_payment: Decimal
    eligible: bool
    financial_details: FinancialDetailsResponse
    scenarios: list[ScenarioResponse] = []
    dti_adjustments: list[DTIAdjustmentResponse] = []
    front_end_status: DTIStatusResponse | None = None
    back_end_status: DTIStatusResponse | None = None


class ValidationResponse(BaseModel):
    valid: bool
    missing: str | None = None
    message: str | None = None
    factor_issues: list[str] = []


class RateResponse(BaseModel):
    base_interest_rate: Decimal
    fico_adjustment: Decimal
    ltv_adjustment: Decimal
    adjusted_interest_rate: Decimal
    offered: bool


class LimitsResponse(BaseModel):
    loan_type: LoanType
    front_end_limit: Decimal
    back_end_limit: Decimal
    base_dti: Decimal
    dti_cap: Decimal
    min_ltv: Decimal
    max_ltv: Decimal
    min_fico: int


class MarketDataResponse(BaseModel):
    conventional_interest_rate: Decimal | None = None
    fha_interest_rate: Decimal | None = None
    property_tax_rate: Decimal | None = None
    property_insurance_annual: Decimal | None = None
