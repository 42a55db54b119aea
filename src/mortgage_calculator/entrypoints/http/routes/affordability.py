from fastapi import APIRouter, Depends

from mortgage_calculator.entrypoints.http.dependencies import get_compute_affordability_use_case
from mortgage_calculator.entrypoints.http.dtos.affordability import (
    AffordabilityRequestDTO,
    AffordabilityResponseDTO,
)
from mortgage_calculator.entrypoints.http.error_responses import ErrorResponse
from mortgage_calculator.entrypoints.http.mappers.affordability_mapper import AffordabilityMapper
from mortgage_calculator.infra.config import Settings, get_settings
from mortgage_calculator.use_cases.compute_affordability import ComputeAffordability


router = APIRouter(tags=["Affordability"])


@router.post(
    "/affordability",
    response_model=AffordabilityResponseDTO,
    summary="Compute maximum affordable loan",
    description="""
    Determine the largest mortgage a borrower can carry under front-end and
    back-end debt-to-income ceilings, with a full amortization schedule.

    ## Monetary Values
    - Inputs may be JSON numbers or decimal strings (e.g., "120000.00")
    - All monetary values in the response are strings
    - Amounts are rounded to cents with banker's rounding

    ## Calculation
    - Front-end ceiling = annual_income / 12 × max_front_end_dti
    - Back-end ceiling = annual_income / 12 × max_back_end_dti − monthly_debts
    - The lower ceiling binds; escrow (taxes, insurance, HOA) is subtracted
      to get the principal & interest budget
    - The budget is inverted through the fixed-rate amortization formula
    - Debts exceeding the back-end budget yield a zero loan, not an error

    ## Example
    ```
    POST /v1/affordability
    {
        "annual_income": "120000",
        "monthly_debts": "500",
        "down_payment": "40000",
        "annual_interest_rate_pct": "6.0",
        "loan_term_months": 360,
        "property_tax_annual": "3600",
        "home_insurance_annual": "1200"
    }
    ```
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        422: {"model": ErrorResponse, "description": "Loan term exceeds the configured bound"},
    },
)
def compute_affordability(
    payload: AffordabilityRequestDTO,
    use_case: ComputeAffordability = Depends(get_compute_affordability_use_case),
    settings: Settings = Depends(get_settings),
) -> AffordabilityResponseDTO:
    """Affordability endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request (validates every field)
    request = AffordabilityMapper.to_domain_request(
        payload,
        default_max_front_end_dti=settings.default_max_front_end_dti,
        default_max_back_end_dti=settings.default_max_back_end_dti,
    )

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response (Decimal → string)
    return AffordabilityMapper.to_response(result)
