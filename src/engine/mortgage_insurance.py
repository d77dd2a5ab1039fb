"""Mortgage insurance: FHA MIP and conventional PMI.

All rates are annual percentages of the loan amount.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.models.borrower import LoanType

FHA_UPFRONT_MIP = Decimal("1.75")

# (term <= 15 years, LTV <= 90) -> annual MIP
FHA_ANNUAL_MIP: dict[tuple[bool, bool], Decimal] = {
    (True, True): Decimal("0.45"),
    (True, False): Decimal("0.70"),
    (False, True): Decimal("0.50"),
    (False, False): Decimal("0.55"),
}

PMI_REMOVAL_LTV = Decimal("80")


@dataclass(frozen=True)
class MipRates:
    upfront_mip_percent: Decimal
    annual_mip_percent: Decimal


def fha_mip_rates(ltv: Decimal, term_years: int = 30) -> MipRates:
    annual = FHA_ANNUAL_MIP[(term_years <= 15, ltv <= 90)]
    return MipRates(upfront_mip_percent=FHA_UPFRONT_MIP, annual_mip_percent=annual)


def conventional_pmi_rate(ltv: Decimal) -> Decimal:
    """Rough PMI estimate; none at or below 80% LTV."""
    if ltv <= PMI_REMOVAL_LTV:
        return Decimal("0")
    if ltv > 95:
        return Decimal("1.1")
    if ltv > 90:
        return Decimal("0.8")
    if ltv > 85:
        return Decimal("0.5")
    return Decimal("0.3")


def mortgage_insurance_rate(
    loan_type: LoanType,
    ltv: Decimal,
    ongoing_mip: Decimal | None = None,
    term_years: int = 30,
) -> Decimal:
    """Annual MIP/PMI percent. FHA prefers the quoted ongoing MIP when given."""
    if loan_type is LoanType.FHA:
        if ongoing_mip:
            return ongoing_mip
        return fha_mip_rates(ltv, term_years).annual_mip_percent
    return conventional_pmi_rate(ltv)


def upfront_mip_amount(loan_amount: Decimal, upfront_mip: Decimal | None = None) -> Decimal:
    rate = upfront_mip if upfront_mip is not None else FHA_UPFRONT_MIP
    return (loan_amount * rate / 100).quantize(Decimal("1"))


def monthly_mortgage_insurance(loan_amount: Decimal, annual_rate: Decimal) -> Decimal:
    return annual_rate / 100 * loan_amount / 12
