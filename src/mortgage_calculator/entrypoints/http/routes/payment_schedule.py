from fastapi import APIRouter, Depends

from mortgage_calculator.entrypoints.http.dependencies import (
    get_calculate_payment_schedule_use_case,
)
from mortgage_calculator.entrypoints.http.dtos.payment_schedule import (
    PaymentScheduleRequestDTO,
    PaymentScheduleResponseDTO,
)
from mortgage_calculator.entrypoints.http.error_responses import ErrorResponse
from mortgage_calculator.entrypoints.http.mappers.payment_schedule_mapper import (
    PaymentScheduleMapper,
)
from mortgage_calculator.use_cases.calculate_payment_schedule import CalculatePaymentSchedule


router = APIRouter(tags=["Payment Schedule"])


@router.post(
    "/payment-schedule",
    response_model=PaymentScheduleResponseDTO,
    summary="Amortize a loan",
    description="""
    Compute the level monthly payment and full amortization schedule for a
    known loan amount, rate and term. The last period absorbs rounding so the
    balance closes at exactly zero.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        422: {"model": ErrorResponse, "description": "Loan term exceeds the configured bound"},
    },
)
def calculate_payment_schedule(
    payload: PaymentScheduleRequestDTO,
    use_case: CalculatePaymentSchedule = Depends(get_calculate_payment_schedule_use_case),
) -> PaymentScheduleResponseDTO:
    request = PaymentScheduleMapper.to_domain_request(payload)
    plan = use_case.execute(request)
    return PaymentScheduleMapper.to_response(plan)
