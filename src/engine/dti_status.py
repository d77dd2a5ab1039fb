"""Front-end and back-end DTI status against published guideline thresholds.

Each ratio lands in one band:
    normal   <= default limit
    caution  <= warning threshold
    warning  <= hard cap (back-end only)
    exceeded  > hard cap
"""

from dataclasses import dataclass
from decimal import Decimal

from src.models.borrower import LoanType
from src.models.results import DTIStatus


@dataclass(frozen=True)
class GuidelineLimits:
    default: Decimal
    warning: Decimal
    hard_cap: Decimal | None = None


FRONT_END_LIMITS: dict[LoanType, GuidelineLimits] = {
    LoanType.CONVENTIONAL: GuidelineLimits(Decimal("36"), Decimal("45")),
    LoanType.FHA: GuidelineLimits(Decimal("31"), Decimal("46.99")),
}

BACK_END_LIMITS: dict[LoanType, GuidelineLimits] = {
    LoanType.CONVENTIONAL: GuidelineLimits(Decimal("45"), Decimal("50"), Decimal("55")),
    LoanType.FHA: GuidelineLimits(Decimal("43"), Decimal("50"), Decimal("59")),
}

FALLBACK_HARD_CAP = Decimal("59")


def dti_limits(loan_type: LoanType, has_strong_factors: bool = False) -> tuple[Decimal, Decimal]:
    """(front-end, back-end) limits, widened when strong compensating factors exist."""
    front = FRONT_END_LIMITS[loan_type].default
    if has_strong_factors:
        back = Decimal("57") if loan_type is LoanType.FHA else Decimal("50")
    elif loan_type is LoanType.CONVENTIONAL:
        back = BACK_END_LIMITS[loan_type].warning
    else:
        back = BACK_END_LIMITS[loan_type].default
    return front, back


def _pct(value: Decimal) -> str:
    return f"{float(value):.1f}%"


def evaluate_front_end_dti(
    dti: Decimal,
    loan_type: LoanType,
    has_strong_factors: bool = False,
) -> DTIStatus:
    limits = FRONT_END_LIMITS[loan_type]
    name = loan_type.value.upper()

    if dti <= limits.default:
        return DTIStatus(
            value=dti,
            status="normal",
            message="Housing expense ratio is within standard guidelines",
            help_text=(
                f"Your housing expenses are {_pct(dti)} of your monthly income, which is within "
                f"the standard {limits.default}% guideline for {name} loans."
            ),
        )
    if dti <= limits.warning:
        return DTIStatus(
            value=dti,
            status="caution",
            message=f"Housing ratio of {_pct(dti)} exceeds standard {limits.default}%",
            help_text=(
                f"While higher than the standard {limits.default}% guideline, housing ratios up to "
                f"{limits.warning}% are often acceptable with strong compensating factors like "
                "good credit or cash reserves."
            ),
        )
    lead = "Your strong compensating factors may help, but" if has_strong_factors else "Consider"
    return DTIStatus(
        value=dti,
        status="warning",
        message=f"Housing ratio of {_pct(dti)} exceeds {limits.warning}%",
        help_text=(
            f"Housing ratios above {limits.warning}% may be difficult to qualify for. {lead} "
            "reducing your target home price or increasing your down payment."
        ),
    )


def evaluate_back_end_dti(
    dti: Decimal,
    loan_type: LoanType,
    has_strong_factors: bool = False,
) -> DTIStatus:
    limits = BACK_END_LIMITS[loan_type]
    hard_cap = limits.hard_cap or FALLBACK_HARD_CAP
    name = loan_type.value.upper()

    if dti <= limits.default:
        return DTIStatus(
            value=dti,
            status="normal",
            message="Total debt ratio is within standard guidelines",
            help_text=(
                f"Your total debt obligations are {_pct(dti)} of your monthly income, which is "
                f"within the standard {limits.default}% guideline for {name} loans."
            ),
        )
    if dti <= limits.warning:
        support = (
            "with your strong compensating factors" if has_strong_factors
            else "if you have compensating factors like good credit or cash reserves"
        )
        return DTIStatus(
            value=dti,
            status="caution",
            message=f"Debt ratio of {_pct(dti)} exceeds standard {limits.default}%",
            help_text=(
                f"While higher than the standard {limits.default}% guideline, debt ratios up to "
                f"{limits.warning}% may be acceptable {support}."
            ),
        )
    if dti <= hard_cap:
        lead = "Even with your strong profile, this" if has_strong_factors else "This"
        return DTIStatus(
            value=dti,
            status="warning",
            message=f"Debt ratio of {_pct(dti)} approaching maximum {hard_cap}%",
            help_text=(
                f"Debt ratios above {limits.warning}% require significant compensating factors. "
                f"{lead} may limit your loan options or require additional down payment."
            ),
        )
    return DTIStatus(
        value=dti,
        status="exceeded",
        message=f"Debt ratio of {_pct(dti)} exceeds maximum {hard_cap}%",
        help_text=(
            f"Debt ratios above {hard_cap}% exceed lending guidelines. Consider reducing your "
            "target home price, increasing down payment, or reducing existing debt."
        ),
    )
