"""Compensating factor weights: additive DTI bonuses per factor tier.

Each category maps its tier strings to a bonus in DTI percentage points. Tier
strings are matched exactly. A tier that is not in the table adds nothing and
is logged, so stale saved selections never break a calculation.

Credit history and non-housing DTI tiers are derived from the borrower's FICO
score and debts rather than selected.
"""

import logging
from decimal import Decimal

from src.models.borrower import FactorKey

logger = logging.getLogger(__name__)

NONE_TIER = "none"

FACTOR_WEIGHTS: dict[str, dict[str, Decimal]] = {
    FactorKey.CASH_RESERVES.value: {
        NONE_TIER: Decimal("0"),
        "1-2 months": Decimal("0"),
        "3-5 months": Decimal("2"),
        "3-6 months": Decimal("2"),
        "6+ months": Decimal("4"),
    },
    FactorKey.RESIDUAL_INCOME.value: {
        NONE_TIER: Decimal("0"),
        "does not meet": Decimal("0"),
        "20-30%": Decimal("2"),
        "30%+": Decimal("4"),
        "meets VA guidelines": Decimal("0"),  # Strong factor, no DTI bonus
    },
    FactorKey.CREDIT_HISTORY.value: {
        NONE_TIER: Decimal("0"),
        "<640": Decimal("0"),
        "640-679": Decimal("0"),
        "680-719": Decimal("0"),
        "720-759": Decimal("2"),
        "760+": Decimal("3"),
    },
    FactorKey.HOUSING_PAYMENT_INCREASE.value: {
        NONE_TIER: Decimal("0"),
        "<10%": Decimal("3"),
        "10-20%": Decimal("2"),
        ">20%": Decimal("0"),
    },
    FactorKey.EMPLOYMENT_HISTORY.value: {
        NONE_TIER: Decimal("0"),
        "<2 years": Decimal("0"),
        "2-5 years": Decimal("1"),
        "3-5 years": Decimal("1"),
        "5+ years": Decimal("2"),
    },
    FactorKey.CREDIT_UTILIZATION.value: {
        NONE_TIER: Decimal("0"),
        ">30%": Decimal("0"),
        "10-30%": Decimal("1"),
        "<30%": Decimal("1"),
        "<10%": Decimal("2"),
    },
    FactorKey.DOWN_PAYMENT.value: {
        NONE_TIER: Decimal("0"),
        "<5%": Decimal("0"),
        "5-10%": Decimal("0"),
        "10-15%": Decimal("1"),
        "10-20%": Decimal("1"),
        "15%+": Decimal("2"),
        "20%+": Decimal("2"),
    },
    FactorKey.NON_HOUSING_DTI.value: {
        NONE_TIER: Decimal("0"),
        ">10%": Decimal("0"),
        "5-10%": Decimal("0"),
        "<5%": Decimal("0"),  # Strong factor, no DTI bonus
    },
}

STRONG_TIERS: dict[str, frozenset[str]] = {
    FactorKey.CREDIT_HISTORY.value: frozenset({"760+"}),
    FactorKey.CASH_RESERVES.value: frozenset({"6+ months"}),
    FactorKey.NON_HOUSING_DTI.value: frozenset({"<5%"}),
    FactorKey.RESIDUAL_INCOME.value: frozenset({"meets VA guidelines"}),
}


def default_tiers() -> dict[str, str]:
    """Every category at its weakest tier."""
    return {category: NONE_TIER for category in FACTOR_WEIGHTS}


def credit_history_tier(fico_score: int) -> str:
    if fico_score >= 760:
        return "760+"
    if fico_score >= 720:
        return "720-759"
    if fico_score >= 680:
        return "680-719"
    if fico_score >= 640:
        return "640-679"
    return "<640"


def non_housing_dti_tier(monthly_debts: Decimal, monthly_income: Decimal) -> str:
    if monthly_income <= 0:
        return ">10%"
    pct = monthly_debts / monthly_income * 100
    if pct < 5:
        return "<5%"
    if pct <= 10:
        return "5-10%"
    return ">10%"


def is_known_tier(category: str, tier: str) -> bool:
    return tier in FACTOR_WEIGHTS.get(category, {})


def factor_weight(category: str, tier: str) -> Decimal:
    """DTI bonus for a selected tier; 0 for anything not in the table."""
    weights = FACTOR_WEIGHTS.get(category)
    if weights is None:
        logger.warning("Unknown compensating factor %r ignored", category)
        return Decimal("0")
    weight = weights.get(tier)
    if weight is None:
        logger.warning("Unrecognized tier %r for factor %r, counting as 0", tier, category)
        return Decimal("0")
    return weight


def is_strong_factor(category: str, tier: str) -> bool:
    return tier in STRONG_TIERS.get(category, frozenset())


def count_strong_factors(tiers: dict[str, str]) -> int:
    return sum(1 for category, tier in tiers.items() if is_strong_factor(category, tier))
