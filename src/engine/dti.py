"""Maximum allowable back-end DTI.

    max DTI = min(base + sum(adjustments), cap)

Base and cap by loan type: conventional 36 / 50, FHA 43 / 57.

Compensating factors arrive either as a tier map (StructuredTiers) or as the
older list of factor names (LegacyFactors). normalize_factors() turns both into
one list of DTIAdjustment lines; everything after that is shared.

Pure functions. No I/O.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from src.engine.compensating_factors import (
    FACTOR_WEIGHTS,
    count_strong_factors,
    credit_history_tier,
    default_tiers,
    factor_weight,
    non_housing_dti_tier,
)
from src.models.borrower import (
    CompensatingFactors,
    FactorKey,
    LegacyFactors,
    LoanType,
    StructuredTiers,
    coerce_factors,
)
from src.models.results import DTIAdjustment

logger = logging.getLogger(__name__)

BASE_DTI: dict[LoanType, Decimal] = {
    LoanType.CONVENTIONAL: Decimal("36"),
    LoanType.FHA: Decimal("43"),
}

DTI_CAP: dict[LoanType, Decimal] = {
    LoanType.CONVENTIONAL: Decimal("50"),
    LoanType.FHA: Decimal("57"),
}

# Single ceiling the list-of-names input can reach
LEGACY_CEILING: dict[LoanType, Decimal] = {
    LoanType.CONVENTIONAL: Decimal("45"),
    LoanType.FHA: Decimal("50"),
}

LEGACY_FICO_THRESHOLD: dict[LoanType, int] = {
    LoanType.CONVENTIONAL: 720,
    LoanType.FHA: 680,
}


@dataclass(frozen=True)
class EffectiveFactors:
    tiers: dict[str, str]
    adjustments: tuple[DTIAdjustment, ...]

    @property
    def dti_increase(self) -> Decimal:
        return sum((a.points for a in self.adjustments), Decimal("0"))


@dataclass(frozen=True)
class DTIDecision:
    base: Decimal
    cap: Decimal
    adjustments: tuple[DTIAdjustment, ...]
    strong_factor_count: int
    max_dti: Decimal


def conventional_ltv_bonus(ltv: Decimal) -> Decimal:
    if ltv <= 75:
        return Decimal("3")
    if ltv <= 80:
        return Decimal("2")
    return Decimal("0")


def _structured_factors(
    factors: StructuredTiers,
    fico_score: int,
    ltv: Decimal,
    loan_type: LoanType,
    monthly_debts: Decimal,
    monthly_income: Decimal,
) -> EffectiveFactors:
    tiers = default_tiers()
    for category, tier in factors.tiers.items():
        if category not in FACTOR_WEIGHTS:
            logger.warning("Unknown compensating factor %r ignored", category)
            continue
        tiers[category] = tier or "none"

    tiers[FactorKey.CREDIT_HISTORY.value] = credit_history_tier(fico_score)
    tiers[FactorKey.NON_HOUSING_DTI.value] = non_housing_dti_tier(monthly_debts, monthly_income)

    adjustments = []
    for category, tier in tiers.items():
        points = factor_weight(category, tier)
        if points:
            adjustments.append(DTIAdjustment(source=category, points=points, detail=tier))

    # FHA carries LTV risk in rate and MIP instead of DTI
    if loan_type is LoanType.CONVENTIONAL:
        bonus = conventional_ltv_bonus(ltv)
        if bonus:
            adjustments.append(DTIAdjustment(source="ltv", points=bonus, detail=f"LTV {ltv}%"))

    return EffectiveFactors(tiers=tiers, adjustments=tuple(adjustments))


def _legacy_factors(
    factors: LegacyFactors,
    fico_score: int,
    ltv: Decimal,
    loan_type: LoanType,
    monthly_debts: Decimal,
    monthly_income: Decimal,
) -> EffectiveFactors:
    names = factors.names
    triggers = []
    if fico_score >= LEGACY_FICO_THRESHOLD[loan_type]:
        triggers.append(f"FICO {fico_score}")
    if "reserves" in names:
        triggers.append("reserves")
    if loan_type is LoanType.CONVENTIONAL and ltv <= 75:
        triggers.append(f"LTV {ltv}%")
    if loan_type is LoanType.FHA and len(names) >= 2:
        triggers.append(f"{len(names)} listed factors")

    tiers = {
        FactorKey.CREDIT_HISTORY.value: credit_history_tier(fico_score),
        FactorKey.NON_HOUSING_DTI.value: non_housing_dti_tier(monthly_debts, monthly_income),
        FactorKey.CASH_RESERVES.value: "6+ months" if "reserves" in names else "none",
    }

    adjustments: tuple[DTIAdjustment, ...] = ()
    if triggers:
        points = LEGACY_CEILING[loan_type] - BASE_DTI[loan_type]
        adjustments = (DTIAdjustment(source="legacy", points=points, detail=", ".join(triggers)),)

    return EffectiveFactors(tiers=tiers, adjustments=adjustments)


def normalize_factors(
    selected_factors: CompensatingFactors | dict | list | None,
    fico_score: int,
    ltv: Decimal,
    loan_type: LoanType,
    monthly_debts: Decimal = Decimal("0"),
    monthly_income: Decimal = Decimal("0"),
) -> EffectiveFactors:
    """Resolve either factor shape into effective tiers and DTI adjustments."""
    factors = coerce_factors(selected_factors)
    if isinstance(factors, LegacyFactors):
        return _legacy_factors(factors, fico_score, ltv, loan_type, monthly_debts, monthly_income)
    return _structured_factors(factors, fico_score, ltv, loan_type, monthly_debts, monthly_income)


def dti_decision(
    fico_score: int,
    ltv: Decimal,
    loan_type: LoanType,
    selected_factors: CompensatingFactors | dict | list | None = None,
    monthly_debts: Decimal = Decimal("0"),
    monthly_income: Decimal = Decimal("0"),
) -> DTIDecision:
    """Full DTI derivation, including the adjustment lines behind the result."""
    effective = normalize_factors(
        selected_factors, fico_score, ltv, loan_type, monthly_debts, monthly_income,
    )
    base = BASE_DTI[loan_type]
    cap = DTI_CAP[loan_type]
    result = min(base + effective.dti_increase, cap)

    logger.debug(
        "DTI %s: base %s + %s (capped at %s) = %s",
        loan_type.value, base, effective.dti_increase, cap, result,
    )

    return DTIDecision(
        base=base,
        cap=cap,
        adjustments=effective.adjustments,
        strong_factor_count=count_strong_factors(effective.tiers),
        max_dti=result,
    )


def max_dti(
    fico_score: int,
    ltv: Decimal,
    loan_type: LoanType,
    selected_factors: CompensatingFactors | dict | list | None = None,
    monthly_debts: Decimal = Decimal("0"),
    monthly_income: Decimal = Decimal("0"),
) -> Decimal:
    """Maximum allowable back-end DTI, in percent."""
    return dti_decision(
        fico_score, ltv, loan_type, selected_factors, monthly_debts, monthly_income,
    ).max_dti
