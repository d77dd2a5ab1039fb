"""Engine outputs: DTI adjustment lines, ratio statuses, scenarios and the full result."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.models.borrower import LoanType


@dataclass(frozen=True)
class DTIAdjustment:
    """One additive bonus (percentage points) on top of the base DTI."""
    source: str  # Factor category, "ltv" or "legacy"
    points: Decimal
    detail: str = ""


@dataclass(frozen=True)
class DTIStatus:
    value: Decimal
    status: str  # normal | caution | warning | exceeded
    message: str
    help_text: str


@dataclass
class FinancialDetails:
    monthly_income: Decimal = Decimal("0")
    max_monthly_debt_payment: Decimal = Decimal("0")
    available_for_mortgage: Decimal = Decimal("0")  # Negative = debts exceed budget
    strong_factor_count: int = 0

    loan_amount: Decimal = Decimal("0")
    mortgage_insurance_rate: Decimal = Decimal("0")  # PMI or MIP, annual percent
    upfront_mip_amount: Decimal = Decimal("0")  # FHA only
    front_end_dti: Decimal = Decimal("0")
    back_end_dti: Decimal = Decimal("0")


@dataclass
class Scenario:
    name: str
    description: str
    loan_type: LoanType
    fico_change: int = 0
    ltv_change: Decimal = Decimal("0")  # Negative = bigger down payment
    max_home_price: Decimal = Decimal("0")
    monthly_payment: Decimal = Decimal("0")
    increase: Decimal = Decimal("0")  # Versus the base max home price
    adjusted_interest_rate: Decimal = Decimal("0")
    max_dti: Decimal = Decimal("0")
    eligible: bool = True


@dataclass
class EngineResult:
    max_dti: Decimal = Decimal("0")
    adjusted_interest_rate: Decimal = Decimal("0")
    max_home_price: Decimal = Decimal("0")
    monthly_payment: Decimal = Decimal("0")
    financial_details: FinancialDetails = field(default_factory=FinancialDetails)
    scenarios: list[Scenario] = field(default_factory=list)

    dti_adjustments: list[DTIAdjustment] = field(default_factory=list)
    eligible: bool = True  # Loan type offered at this FICO
    front_end_status: DTIStatus | None = None
    back_end_status: DTIStatus | None = None
