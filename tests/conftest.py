"""Canonical test fixtures used across all engine tests.

Fixture: $100K income, $500/mo debts, 720 FICO, conventional 80% LTV,
6.75% market rate, 1.25% property tax, $1,200/yr insurance.
"""

import pytest
from decimal import Decimal

from src.models.borrower import (
    BorrowerProfile,
    LegacyFactors,
    LoanParameters,
    LoanType,
    Location,
    StructuredTiers,
)


@pytest.fixture
def canonical_profile() -> BorrowerProfile:
    """720 FICO borrower with no compensating factors selected."""
    return BorrowerProfile(
        annual_income=Decimal("100000"),
        fico_score=720,
        monthly_debts=Decimal("500"),
    )


@pytest.fixture
def strong_profile() -> BorrowerProfile:
    """780 FICO, six months of reserves, residual income meeting VA guidelines."""
    return BorrowerProfile(
        annual_income=Decimal("100000"),
        fico_score=780,
        monthly_debts=Decimal("500"),
        selected_factors=StructuredTiers(tiers={
            "cashReserves": "6+ months",
            "residualIncome": "meets VA guidelines",
        }),
    )


@pytest.fixture
def legacy_profile() -> BorrowerProfile:
    """Older saved snapshot: factors stored as a list of names."""
    return BorrowerProfile(
        annual_income=Decimal("100000"),
        fico_score=650,
        monthly_debts=Decimal("500"),
        selected_factors=LegacyFactors(names=frozenset({"reserves"})),
    )


@pytest.fixture
def canonical_loan() -> LoanParameters:
    """Conventional, 80% LTV, 30yr fixed."""
    return LoanParameters(
        loan_type=LoanType.CONVENTIONAL,
        ltv=Decimal("80"),
        base_interest_rate=Decimal("6.75"),
        property_tax_rate=Decimal("1.25"),
        property_insurance_annual=Decimal("1200"),
    )


@pytest.fixture
def fha_loan() -> LoanParameters:
    """FHA, 96.5% LTV, quoted MIP."""
    return LoanParameters(
        loan_type=LoanType.FHA,
        ltv=Decimal("96.5"),
        base_interest_rate=Decimal("6.25"),
        property_tax_rate=Decimal("1.25"),
        property_insurance_annual=Decimal("1200"),
        upfront_mip=Decimal("1.75"),
        ongoing_mip=Decimal("0.55"),
    )


@pytest.fixture
def canonical_location() -> Location:
    return Location(city="Columbus", state="OH", zip_code="43215")
