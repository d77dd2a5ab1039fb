"""Affordability routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_market_source
from src.api.schemas import (
    AffordabilityRequest,
    AffordabilityResponse,
    DTIAdjustmentResponse,
    DTIStatusResponse,
    FinancialDetailsResponse,
    LimitsResponse,
    QuoteRequest,
    RateRequest,
    RateResponse,
    ScenarioResponse,
    ValidationResponse,
)
from src.config import settings
from src.data.base import MarketDataSource
from src.engine.calculator import EngineRun, run_engine
from src.engine.dti import BASE_DTI, DTI_CAP
from src.engine.dti_status import dti_limits
from src.engine.loan_products import build_loan_parameters, ltv_range
from src.engine.rate_adjustments import (
    MIN_FICO,
    adjusted_rate,
    fico_rate_adjustment,
    is_loan_type_offered,
    ltv_rate_adjustment,
)
from src.engine.validation import factor_completeness_issues, validate
from src.models.borrower import LoanParameters, LoanType
from src.models.results import DTIStatus, EngineResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/affordability", tags=["affordability"])


def _status_response(status: DTIStatus | None) -> DTIStatusResponse | None:
    if status is None:
        return None
    return DTIStatusResponse(
        value=status.value,
        status=status.status,
        message=status.message,
        help_text=status.help_text,
    )


def _result_to_response(result: EngineResult) -> AffordabilityResponse:
    """Convert engine EngineResult to API response."""
    d = result.financial_details
    details = FinancialDetailsResponse(
        monthly_income=d.monthly_income,
        max_monthly_debt_payment=d.max_monthly_debt_payment,
        available_for_mortgage=d.available_for_mortgage,
        strong_factor_count=d.strong_factor_count,
        loan_amount=d.loan_amount,
        mortgage_insurance_rate=d.mortgage_insurance_rate,
        upfront_mip_amount=d.upfront_mip_amount,
        front_end_dti=d.front_end_dti,
        back_end_dti=d.back_end_dti,
    )

    scenarios = [
        ScenarioResponse(
            name=s.name,
            description=s.description,
            loan_type=s.loan_type,
            fico_change=s.fico_change,
            ltv_change=s.ltv_change,
            max_home_price=s.max_home_price,
            monthly_payment=s.monthly_payment,
            increase=s.increase,
            adjusted_interest_rate=s.adjusted_interest_rate,
            max_dti=s.max_dti,
            eligible=s.eligible,
        )
        for s in result.scenarios
    ]

    return AffordabilityResponse(
        max_dti=result.max_dti,
        adjusted_interest_rate=result.adjusted_interest_rate,
        max_home_price=result.max_home_price,
        monthly_payment=result.monthly_payment,
        eligible=result.eligible,
        financial_details=details,
        scenarios=scenarios,
        dti_adjustments=[
            DTIAdjustmentResponse(source=a.source, points=a.points, detail=a.detail)
            for a in result.dti_adjustments
        ],
        front_end_status=_status_response(result.front_end_status),
        back_end_status=_status_response(result.back_end_status),
    )


def _engine_response(run: EngineRun) -> AffordabilityResponse:
    if not run.ok:
        raise HTTPException(
            status_code=422,
            detail={"missing": run.error.value, "message": run.error.message},
        )
    return _result_to_response(run.result)


@router.post("", response_model=AffordabilityResponse)
async def calculate_affordability(req: AffordabilityRequest):
    """Max DTI, adjusted rate, max home price, payment and alternative scenarios."""
    run = run_engine(req.borrower.to_profile(), req.loan.to_loan(), req.location.to_location())
    return _engine_response(run)


@router.post("/quote", response_model=AffordabilityResponse)
async def quote_affordability(
    req: QuoteRequest,
    source: MarketDataSource = Depends(get_market_source),
):
    """Same as the main calculation, with loan pricing taken from market data."""
    location = req.location.to_location()
    if not location.is_complete:
        # Nothing to look up; validation reports the incomplete location
        loan = LoanParameters(loan_type=req.loan_type, ltv=req.ltv)
    else:
        market = await source.get_market_data(location)
        if market is None:
            logger.warning("No market data for %s, %s %s", location.city, location.state, location.zip_code)
            raise HTTPException(status_code=404, detail="No market data for this location")
        loan = build_loan_parameters(
            market,
            req.loan_type,
            req.ltv,
            req.term_years or settings.default_loan_term_years,
            req.property_insurance_annual,
        )

    run = run_engine(req.borrower.to_profile(), loan, location)
    return _engine_response(run)


@router.post("/validate", response_model=ValidationResponse)
async def validate_inputs(req: AffordabilityRequest):
    """Report the first missing required input without running the engine."""
    profile = req.borrower.to_profile()
    error = validate(profile, req.loan.to_loan(), req.location.to_location())
    return ValidationResponse(
        valid=error is None,
        missing=error.value if error else None,
        message=error.message if error else None,
        factor_issues=factor_completeness_issues(profile),
    )


@router.post("/rate", response_model=RateResponse)
async def price_rate(req: RateRequest):
    """Adjusted interest rate for a FICO score and LTV."""
    return RateResponse(
        base_interest_rate=req.base_interest_rate,
        fico_adjustment=fico_rate_adjustment(req.fico_score, req.loan_type),
        ltv_adjustment=ltv_rate_adjustment(req.ltv),
        adjusted_interest_rate=adjusted_rate(
            req.base_interest_rate, req.fico_score, req.ltv, req.loan_type
        ),
        offered=is_loan_type_offered(req.fico_score, req.loan_type),
    )


@router.get("/limits/{loan_type}", response_model=LimitsResponse)
async def get_limits(loan_type: LoanType, strong_factors: bool = False):
    """Guideline DTI limits and selectable LTV range for a loan type."""
    front, back = dti_limits(loan_type, strong_factors)
    min_ltv, max_ltv = ltv_range(loan_type)
    return LimitsResponse(
        loan_type=loan_type,
        front_end_limit=front,
        back_end_limit=back,
        base_dti=BASE_DTI[loan_type],
        dti_cap=DTI_CAP[loan_type],
        min_ltv=min_ltv,
        max_ltv=max_ltv,
        min_fico=MIN_FICO[loan_type],
    )
