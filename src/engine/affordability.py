"""Affordability math: monthly payment and its inverse, maximum home price.

Rates are annual percentages (Decimal("6.75") for 6.75%). Pure functions:
Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP

WHOLE = Decimal("1")
ZERO = Decimal("0")
DEFAULT_TERM_YEARS = 30
DEFAULT_ANNUAL_INSURANCE = Decimal("1200")


def _monthly_rate(interest_rate: Decimal) -> Decimal:
    return interest_rate / 100 / 12


def mortgage_constant(interest_rate: Decimal, term_years: int = DEFAULT_TERM_YEARS) -> Decimal:
    """Monthly P&I per dollar financed: r(1+r)^n / ((1+r)^n - 1)."""
    n = term_years * 12
    r = _monthly_rate(interest_rate)
    if r == 0:
        return WHOLE / n
    factor = (1 + r) ** n
    return r * factor / (factor - 1)


def principal_and_interest(
    loan_amount: Decimal,
    interest_rate: Decimal,
    term_years: int = DEFAULT_TERM_YEARS,
) -> Decimal:
    """Unrounded fixed-rate monthly P&I."""
    if loan_amount <= 0:
        return ZERO
    return loan_amount * mortgage_constant(interest_rate, term_years)


def annual_property_tax(home_price: Decimal, property_tax_rate: Decimal) -> Decimal:
    return home_price * property_tax_rate / 100


def monthly_insurance(annual_insurance: Decimal = DEFAULT_ANNUAL_INSURANCE) -> Decimal:
    return annual_insurance / 12


def monthly_payment(
    loan_amount: Decimal,
    interest_rate: Decimal,
    term_years: int = DEFAULT_TERM_YEARS,
    annual_property_tax: Decimal = ZERO,
    annual_insurance: Decimal = ZERO,
    pmi_rate: Decimal = ZERO,
) -> Decimal:
    """Fully loaded monthly payment (P&I + tax + insurance + PMI/MIP), whole units."""
    pi = principal_and_interest(loan_amount, interest_rate, term_years)
    pmi = pmi_rate / 100 * max(loan_amount, ZERO) / 12
    total = pi + annual_property_tax / 12 + monthly_insurance(annual_insurance) + pmi
    return max(total, ZERO).quantize(WHOLE, ROUND_HALF_UP)


def housing_budget(annual_income: Decimal, monthly_debts: Decimal, dti: Decimal) -> Decimal:
    """Monthly amount left for housing under the DTI limit. Negative if debts exceed it."""
    return annual_income / 12 * dti / 100 - monthly_debts


def max_purchase_price(
    annual_income: Decimal,
    monthly_debts: Decimal,
    dti: Decimal,
    interest_rate: Decimal,
    property_tax_rate: Decimal,
    annual_insurance: Decimal,
    down_payment_percent: Decimal,
    pmi_rate: Decimal = ZERO,
    term_years: int = DEFAULT_TERM_YEARS,
) -> Decimal:
    """Highest home price whose payment fits the DTI budget, floored to whole units.

    Every cost except insurance is expressed per dollar of home price:
        price = (budget - insurance/12) / (P&I multiplier + tax/12 + PMI * LTV/12)
    """
    budget = housing_budget(annual_income, monthly_debts, dti) - monthly_insurance(annual_insurance)
    if budget <= 0:
        return ZERO

    ltv_ratio = 1 - down_payment_percent / 100
    if ltv_ratio > 0:
        pi_multiplier = mortgage_constant(interest_rate, term_years) / ltv_ratio
    else:
        pi_multiplier = ZERO

    tax_multiplier = property_tax_rate / 100 / 12
    pmi_multiplier = pmi_rate / 100 * ltv_ratio / 12
    total_multiplier = pi_multiplier + tax_multiplier + pmi_multiplier
    if total_multiplier <= 0:
        return ZERO

    price = budget / total_multiplier
    return max(price, ZERO).quantize(WHOLE, ROUND_FLOOR)


def max_loan_amount(
    annual_income: Decimal,
    monthly_debts: Decimal,
    dti: Decimal,
    interest_rate: Decimal,
    term_years: int = DEFAULT_TERM_YEARS,
) -> Decimal:
    """Largest principal the DTI budget can amortize, ignoring taxes and insurance."""
    budget = housing_budget(annual_income, monthly_debts, dti)
    if budget <= 0:
        return ZERO
    n = term_years * 12
    r = _monthly_rate(interest_rate)
    if r == 0:
        loan = budget * n
    else:
        # P = PMT * (1 - (1+r)^-n) / r
        loan = budget * (1 - (1 + r) ** -n) / r
    return loan.quantize(WHOLE, ROUND_FLOOR)


def price_and_payment(
    annual_income: Decimal,
    monthly_debts: Decimal,
    dti: Decimal,
    interest_rate: Decimal,
    property_tax_rate: Decimal,
    annual_insurance: Decimal,
    ltv: Decimal,
    pmi_rate: Decimal = ZERO,
    term_years: int = DEFAULT_TERM_YEARS,
) -> tuple[Decimal, Decimal]:
    """(max home price, monthly payment at that price). Zero affordability gives (0, 0)."""
    price = max_purchase_price(
        annual_income,
        monthly_debts,
        dti,
        interest_rate,
        property_tax_rate,
        annual_insurance,
        Decimal("100") - ltv,
        pmi_rate,
        term_years,
    )
    if price <= 0:
        return ZERO, ZERO

    payment = monthly_payment(
        price * ltv / 100,
        interest_rate,
        term_years,
        annual_property_tax(price, property_tax_rate),
        annual_insurance,
        pmi_rate,
    )
    return price, payment
