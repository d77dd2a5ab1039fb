"""What-if scenarios: change one input, re-run affordability.

Produced in order, each only when it applies:
    A. the other loan type (always)
    B. the next FICO band for the current loan type
    C. the next lower LTV band (bigger down payment)
"""

from decimal import Decimal

from src.engine.affordability import DEFAULT_ANNUAL_INSURANCE, price_and_payment
from src.engine.dti import max_dti as compute_max_dti
from src.engine.mortgage_insurance import mortgage_insurance_rate
from src.engine.rate_adjustments import adjusted_rate, is_loan_type_offered
from src.models.borrower import BorrowerProfile, LoanParameters, LoanType
from src.models.results import Scenario

CONVENTIONAL_FICO_STEPS = [620, 640, 660, 680, 700, 720, 740]
FHA_FICO_STEPS = [580, 620, 640, 660, 680, 700, 720, 740]
FHA_FICO_FLOOR = 500

LTV_STEPS = [Decimal(v) for v in ("97", "95", "90", "85", "80", "75", "70", "60")]


def next_fico_band(fico_score: int, loan_type: LoanType) -> int | None:
    """Lowest rate-band boundary above the current score, or None at the top."""
    if loan_type is LoanType.FHA:
        if fico_score < FHA_FICO_FLOOR:
            return None
        steps = FHA_FICO_STEPS
    else:
        steps = CONVENTIONAL_FICO_STEPS
    for step in steps:
        if fico_score < step:
            return step
    return None


def lower_ltv_option(ltv: Decimal) -> Decimal | None:
    """Snap down to the next predefined LTV tier, or None at or below 60%."""
    for step in LTV_STEPS:
        if ltv > step:
            return step
    return None


def _direction(increase: Decimal) -> str:
    return "increase" if increase > 0 else "decrease"


def _fmt(value: Decimal) -> str:
    return f"{value.normalize():f}"


def alternative_scenarios(
    profile: BorrowerProfile,
    loan: LoanParameters,
    max_dti: Decimal,
    base_price: Decimal,
    annual_insurance: Decimal = DEFAULT_ANNUAL_INSURANCE,
) -> list[Scenario]:
    base_rate = loan.base_interest_rate or Decimal("0")
    tax_rate = loan.property_tax_rate or Decimal("0")
    scenarios: list[Scenario] = []

    def run(dti: Decimal, rate: Decimal, ltv: Decimal, pmi: Decimal) -> tuple[Decimal, Decimal]:
        return price_and_payment(
            profile.annual_income,
            profile.monthly_debts,
            dti,
            rate,
            tax_rate,
            annual_insurance,
            ltv,
            pmi,
            loan.term_years,
        )

    # A. Other loan type, same borrower and LTV
    alt_type = loan.loan_type.alternate
    alt_dti = compute_max_dti(
        profile.fico_score,
        loan.ltv,
        alt_type,
        profile.selected_factors,
        profile.monthly_debts,
        profile.monthly_income,
    )
    alt_rate = adjusted_rate(base_rate, profile.fico_score, loan.ltv, alt_type)
    alt_pmi = mortgage_insurance_rate(alt_type, loan.ltv, term_years=loan.term_years)
    alt_price, alt_payment = run(alt_dti, alt_rate, loan.ltv, alt_pmi)
    increase = alt_price - base_price
    label = alt_type.value.upper()
    scenarios.append(Scenario(
        name=f"Switch to {label} loan",
        description=f"Using a {label} loan could {_direction(increase)} your buying power",
        loan_type=alt_type,
        max_home_price=alt_price,
        monthly_payment=alt_payment,
        increase=increase,
        adjusted_interest_rate=alt_rate,
        max_dti=alt_dti,
        eligible=is_loan_type_offered(profile.fico_score, alt_type),
    ))

    # B. Next FICO band: only the rate moves
    next_fico = next_fico_band(profile.fico_score, loan.loan_type)
    if next_fico is not None:
        fico_rate = adjusted_rate(base_rate, next_fico, loan.ltv, loan.loan_type)
        pmi = mortgage_insurance_rate(loan.loan_type, loan.ltv, loan.ongoing_mip, loan.term_years)
        price, payment = run(max_dti, fico_rate, loan.ltv, pmi)
        increase = price - base_price
        change = next_fico - profile.fico_score
        scenarios.append(Scenario(
            name=f"Improve your FICO score by {change} points",
            description=(
                f"Increasing your FICO score to {next_fico} could "
                f"{_direction(increase)} your buying power"
            ),
            loan_type=loan.loan_type,
            fico_change=change,
            max_home_price=price,
            monthly_payment=payment,
            increase=increase,
            adjusted_interest_rate=fico_rate,
            max_dti=max_dti,
            eligible=is_loan_type_offered(next_fico, loan.loan_type),
        ))

    # C. Bigger down payment: rate and MIP/PMI follow the new LTV
    lower_ltv = lower_ltv_option(loan.ltv)
    if lower_ltv is not None:
        ltv_rate = adjusted_rate(base_rate, profile.fico_score, lower_ltv, loan.loan_type)
        pmi = mortgage_insurance_rate(loan.loan_type, lower_ltv, term_years=loan.term_years)
        price, payment = run(max_dti, ltv_rate, lower_ltv, pmi)
        increase = price - base_price
        scenarios.append(Scenario(
            name=f"Increase down payment by {_fmt(loan.ltv - lower_ltv)}%",
            description=(
                f"A {_fmt(100 - lower_ltv)}% down payment could "
                f"{_direction(increase)} your buying power"
            ),
            loan_type=loan.loan_type,
            ltv_change=lower_ltv - loan.ltv,
            max_home_price=price,
            monthly_payment=payment,
            increase=increase,
            adjusted_interest_rate=ltv_rate,
            max_dti=max_dti,
            eligible=is_loan_type_offered(profile.fico_score, loan.loan_type),
        ))

    return scenarios
