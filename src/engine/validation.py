"""Pre-flight checks before the engine runs.

Missing inputs are returned, not raised, so callers can branch on the result
and show the message that points the borrower back to the right step.
"""

import logging
from enum import Enum

from src.engine.compensating_factors import FACTOR_WEIGHTS, is_known_tier
from src.models.borrower import (
    COMPUTED_FACTORS,
    BorrowerProfile,
    LegacyFactors,
    LoanParameters,
    Location,
)

logger = logging.getLogger(__name__)


class MissingInput(Enum):
    LOCATION = "location"
    INCOME = "income"
    INTEREST_RATE = "interest_rate"
    PROPERTY_TAX = "property_tax"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    MissingInput.LOCATION: "Please complete your location information in Step 1.",
    MissingInput.INCOME: "Please enter your annual income in Step 2.",
    MissingInput.INTEREST_RATE: "Required loan details are missing. Please complete Step 3.",
    MissingInput.PROPERTY_TAX: "Property tax information is missing. Please complete Step 3.",
}


def factor_completeness_issues(profile: BorrowerProfile) -> list[str]:
    """Describe unset or unrecognized factor tiers. Informational only."""
    factors = profile.selected_factors
    if isinstance(factors, LegacyFactors):
        return []

    issues = []
    for category in FACTOR_WEIGHTS:
        if category in COMPUTED_FACTORS:
            continue
        tier = factors.tiers.get(category)
        if tier is None:
            issues.append(f"{category}: not set, defaulting to none")
        elif not is_known_tier(category, tier):
            issues.append(f"{category}: unrecognized tier {tier!r}, counting as none")
    for category in factors.tiers:
        if category not in FACTOR_WEIGHTS:
            issues.append(f"{category}: unknown factor, ignored")
    return issues


def validate(
    profile: BorrowerProfile,
    loan: LoanParameters,
    location: Location,
) -> MissingInput | None:
    """First missing required input, or None when the engine can run."""
    if not location.is_complete:
        error = MissingInput.LOCATION
    elif not profile.annual_income or profile.annual_income <= 0:
        error = MissingInput.INCOME
    elif not loan.base_interest_rate or loan.base_interest_rate <= 0:
        error = MissingInput.INTEREST_RATE
    elif not loan.property_tax_rate or loan.property_tax_rate <= 0:
        error = MissingInput.PROPERTY_TAX
    else:
        error = None

    if error is not None:
        logger.info("Validation failed: %s", error.value)
        return error

    for issue in factor_completeness_issues(profile):
        logger.info("Compensating factor defaulted: %s", issue)
    return None
