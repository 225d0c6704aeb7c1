"""POST /api/calculate/by-amount and /api/calculate/by-weight - loan eligibility calculation"""

import time
import logging
from fastapi import APIRouter, Depends, Request

from gold_loan.api.v1.schemas import CalculationResponse, LoanByAmountRequest, LoanByWeightRequest
from gold_loan.api.dependencies import get_calculation_service, get_request_id
from gold_loan.domain.exceptions import DomainException
from gold_loan.domain.models import LoanCalculationResult
from gold_loan.services.calculation import LoanCalculationService
from gold_loan.infrastructure.observability.logging import log_calculation
from gold_loan.utils.formatting import build_summary, implied_rate_per_gram

router = APIRouter()


def to_response(result: LoanCalculationResult, gold_weight: float | None = None) -> CalculationResponse:
    """Attach display fields to an engine result"""
    return CalculationResponse(
        purity=result.purity.value,
        interest_rate=result.interest_rate,
        principal_amount=result.principal_amount,
        interest_amount=result.interest_amount,
        eligible_amount=result.eligible_amount,
        gold_weight=result.gold_weight,
        loan_amount=result.loan_amount,
        rate_per_gram=implied_rate_per_gram(result, gold_weight),
        summary=build_summary(result, gold_weight),
    )


@router.post("/calculate/by-amount", response_model=CalculationResponse, response_model_exclude_none=True)
def calculate_by_amount(
    request_body: LoanByAmountRequest,
    request: Request,
    service: LoanCalculationService = Depends(get_calculation_service),
):
    """
    Required gold weight for a desired loan amount.

    Returns:
        Principal, interest and eligible amounts plus goldWeight
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = service.calculate_by_amount(
            request_body.loan_amount, request_body.purity, request_body.interest_scheme_id
        )
    except DomainException as e:
        logging.warning(f"Calculation by amount rejected: {e}", extra={"request_id": request_id})
        raise

    duration_ms = (time.time() - start_time) * 1000
    log_calculation(request_id, "by_amount", result.purity.value, request_body.interest_scheme_id, duration_ms)

    return to_response(result)


@router.post("/calculate/by-weight", response_model=CalculationResponse, response_model_exclude_none=True)
def calculate_by_weight(
    request_body: LoanByWeightRequest,
    request: Request,
    service: LoanCalculationService = Depends(get_calculation_service),
):
    """
    Eligible loan amount for an available gold weight.

    Returns:
        Principal, interest and eligible amounts plus loanAmount
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = service.calculate_by_weight(
            request_body.gold_weight, request_body.purity, request_body.interest_scheme_id
        )
    except DomainException as e:
        logging.warning(f"Calculation by weight rejected: {e}", extra={"request_id": request_id})
        raise

    duration_ms = (time.time() - start_time) * 1000
    log_calculation(request_id, "by_weight", result.purity.value, request_body.interest_scheme_id, duration_ms)

    return to_response(result, gold_weight=request_body.gold_weight)
