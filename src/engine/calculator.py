"""Affordability orchestrator: DTI -> rate -> price/payment -> scenarios.

Pure computation. No I/O. BorrowerProfile + LoanParameters in, EngineResult out.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from src.engine.affordability import (
    DEFAULT_ANNUAL_INSURANCE,
    housing_budget,
    price_and_payment,
)
from src.engine.dti import dti_decision
from src.engine.dti_status import evaluate_back_end_dti, evaluate_front_end_dti
from src.engine.mortgage_insurance import mortgage_insurance_rate, upfront_mip_amount
from src.engine.rate_adjustments import adjusted_rate, is_loan_type_offered
from src.engine.scenarios import alternative_scenarios
from src.engine.validation import MissingInput, validate
from src.models.borrower import BorrowerProfile, LoanParameters, LoanType, Location
from src.models.results import EngineResult, FinancialDetails

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


@dataclass(frozen=True)
class EngineRun:
    """Outcome of run_engine(): exactly one of error / result is set."""
    error: MissingInput | None = None
    result: EngineResult | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _ratio(amount: Decimal, monthly_income: Decimal) -> Decimal:
    if monthly_income <= 0:
        return ZERO
    return (amount / monthly_income * 100).quantize(TWO_PLACES, ROUND_HALF_UP)


def calculate_mortgage_results(
    profile: BorrowerProfile,
    loan: LoanParameters,
    default_insurance: Decimal = DEFAULT_ANNUAL_INSURANCE,
) -> EngineResult:
    """Run the full affordability calculation.

    Debts that already use up the DTI budget give a zero price and payment;
    that is a valid outcome, not an error.
    """
    monthly_income = profile.monthly_income
    decision = dti_decision(
        profile.fico_score,
        loan.ltv,
        loan.loan_type,
        profile.selected_factors,
        profile.monthly_debts,
        monthly_income,
    )
    max_dti = decision.max_dti

    max_monthly_debt = monthly_income * max_dti / 100
    available = housing_budget(profile.annual_income, profile.monthly_debts, max_dti)

    base_rate = loan.base_interest_rate or ZERO
    tax_rate = loan.property_tax_rate or ZERO
    insurance = loan.property_insurance_annual or default_insurance
    rate = adjusted_rate(base_rate, profile.fico_score, loan.ltv, loan.loan_type)
    mi_rate = mortgage_insurance_rate(loan.loan_type, loan.ltv, loan.ongoing_mip, loan.term_years)

    logger.debug(
        "Income %s/mo, max debt %s, available %s, rate %s, MI %s",
        monthly_income, max_monthly_debt, available, rate, mi_rate,
    )

    if available <= 0:
        logger.info("Debts consume the full DTI budget; no home price is affordable")
        price, payment = ZERO, ZERO
    else:
        price, payment = price_and_payment(
            profile.annual_income,
            profile.monthly_debts,
            max_dti,
            rate,
            tax_rate,
            insurance,
            loan.ltv,
            mi_rate,
            loan.term_years,
        )

    loan_amount = price * loan.ltv / 100
    upfront = ZERO
    if loan.loan_type is LoanType.FHA and loan_amount > 0:
        upfront = upfront_mip_amount(loan_amount, loan.upfront_mip)

    front_end = _ratio(payment, monthly_income)
    back_end = _ratio(payment + profile.monthly_debts, monthly_income)
    has_strong = decision.strong_factor_count > 0

    details = FinancialDetails(
        monthly_income=monthly_income,
        max_monthly_debt_payment=max_monthly_debt,
        available_for_mortgage=available,
        strong_factor_count=decision.strong_factor_count,
        loan_amount=loan_amount,
        mortgage_insurance_rate=mi_rate,
        upfront_mip_amount=upfront,
        front_end_dti=front_end,
        back_end_dti=back_end,
    )

    scenarios = alternative_scenarios(profile, loan, max_dti, price, insurance)

    return EngineResult(
        max_dti=max_dti,
        adjusted_interest_rate=rate,
        max_home_price=price,
        monthly_payment=payment,
        financial_details=details,
        scenarios=scenarios,
        dti_adjustments=list(decision.adjustments),
        eligible=is_loan_type_offered(profile.fico_score, loan.loan_type),
        front_end_status=evaluate_front_end_dti(front_end, loan.loan_type, has_strong),
        back_end_status=evaluate_back_end_dti(back_end, loan.loan_type, has_strong),
    )


def run_engine(
    profile: BorrowerProfile,
    loan: LoanParameters,
    location: Location,
    default_insurance: Decimal = DEFAULT_ANNUAL_INSURANCE,
) -> EngineRun:
    """Validate, then calculate. Never raises for incomplete or unaffordable inputs."""
    error = validate(profile, loan, location)
    if error is not None:
        return EngineRun(error=error)
    return EngineRun(result=calculate_mortgage_results(profile, loan, default_insurance))
