"""Interest rate adjustments by FICO band and LTV band.

Adjustments are additive, in percentage points, on top of the market rate:
    adjusted = base + FICO adjustment + LTV adjustment

Pure functions. No rounding; display formatting is the caller's concern.
"""

from decimal import Decimal

from src.models.borrower import LoanType

# Conventional loans are not offered below 620. The rate table keeps returning a
# number so callers can still render a figure; eligibility is reported
# separately by is_loan_type_offered().
NOT_OFFERED_PENALTY = Decimal("999")

MIN_FICO: dict[LoanType, int] = {
    LoanType.CONVENTIONAL: 620,
    LoanType.FHA: 500,
}

# (lower bound, band label), highest first
FICO_BANDS: list[tuple[int, str]] = [
    (740, "740+"),
    (720, "720-739"),
    (700, "700-719"),
    (680, "680-699"),
    (660, "660-679"),
    (640, "640-659"),
    (620, "620-639"),
    (580, "580-619"),
    (500, "500-579"),
]

FICO_RATE_ADJUSTMENTS: dict[LoanType, dict[str, Decimal]] = {
    LoanType.CONVENTIONAL: {
        "740+": Decimal("0"),
        "720-739": Decimal("0.125"),
        "700-719": Decimal("0.25"),
        "680-699": Decimal("0.375"),
        "660-679": Decimal("0.5"),
        "640-659": Decimal("0.75"),
        "620-639": Decimal("1.0"),
    },
    LoanType.FHA: {
        "740+": Decimal("0"),
        "720-739": Decimal("0"),
        "700-719": Decimal("0.125"),
        "680-699": Decimal("0.25"),
        "660-679": Decimal("0.25"),
        "640-659": Decimal("0.25"),
        "620-639": Decimal("0.25"),
        "580-619": Decimal("0.5"),
        "500-579": Decimal("0.75"),
    },
}

LTV_RATE_ADJUSTMENTS: dict[str, Decimal] = {
    "below60": Decimal("-0.25"),
    "60-70": Decimal("-0.125"),
    "70-75": Decimal("0"),
    "75-80": Decimal("0"),
    "80-85": Decimal("0.125"),
    "85-90": Decimal("0.25"),
    "90-95": Decimal("0.375"),
    "95-97": Decimal("0.5"),
    "above97": Decimal("0.75"),
}


def fico_band(fico_score: int, loan_type: LoanType) -> str | None:
    """Rate band serviced for this loan type, or None below the table."""
    table = FICO_RATE_ADJUSTMENTS[loan_type]
    for lower, label in FICO_BANDS:
        if fico_score >= lower and label in table:
            return label
    return None


def fico_rate_adjustment(fico_score: int, loan_type: LoanType) -> Decimal:
    band = fico_band(fico_score, loan_type)
    if band is not None:
        return FICO_RATE_ADJUSTMENTS[loan_type][band]
    if loan_type is LoanType.CONVENTIONAL:
        return NOT_OFFERED_PENALTY
    return FICO_RATE_ADJUSTMENTS[LoanType.FHA]["500-579"]


def ltv_band(ltv: Decimal) -> str:
    if ltv < 60:
        return "below60"
    if ltv < 70:
        return "60-70"
    if ltv < 75:
        return "70-75"
    if ltv < 80:
        return "75-80"
    if ltv < 85:
        return "80-85"
    if ltv < 90:
        return "85-90"
    if ltv < 95:
        return "90-95"
    if ltv <= 97:
        return "95-97"
    return "above97"


def ltv_rate_adjustment(ltv: Decimal) -> Decimal:
    return LTV_RATE_ADJUSTMENTS[ltv_band(ltv)]


def adjusted_rate(
    base_rate: Decimal,
    fico_score: int,
    ltv: Decimal,
    loan_type: LoanType,
) -> Decimal:
    """Market rate plus FICO and LTV adjustments, in percent."""
    return base_rate + fico_rate_adjustment(fico_score, loan_type) + ltv_rate_adjustment(ltv)


def is_loan_type_offered(fico_score: int, loan_type: LoanType) -> bool:
    return fico_score >= MIN_FICO[loan_type]
