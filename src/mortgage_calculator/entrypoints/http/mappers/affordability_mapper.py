from __future__ import annotations

from decimal import Decimal

from mortgage_calculator.domain.affordability import (
    DEFAULT_MAX_BACK_END_DTI,
    DEFAULT_MAX_FRONT_END_DTI,
    AffordabilityRequest,
    AffordabilityResult,
    AmortizationEntry,
)
from mortgage_calculator.domain.validation import validate_affordability_input
from mortgage_calculator.entrypoints.http.dtos.affordability import (
    AffordabilityRequestDTO,
    AffordabilityResponseDTO,
    AmortizationEntryDTO,
)


def to_entry_dto(entry: AmortizationEntry) -> AmortizationEntryDTO:
    return AmortizationEntryDTO(
        period_index=entry.period_index,
        payment_amount=str(entry.payment_amount),
        principal_portion=str(entry.principal_portion),
        interest_portion=str(entry.interest_portion),
        remaining_balance=str(entry.remaining_balance),
    )


class AffordabilityMapper:
    """Maps between REST DTOs and domain models for affordability."""

    @staticmethod
    def to_domain_request(
        dto: AffordabilityRequestDTO,
        default_max_front_end_dti: Decimal = DEFAULT_MAX_FRONT_END_DTI,
        default_max_back_end_dti: Decimal = DEFAULT_MAX_BACK_END_DTI,
    ) -> AffordabilityRequest:
        """
        Converts request DTO to domain AffordabilityRequest.

        Handles raw value → Decimal conversion at the boundary.

        Raises:
            ValidationError: If any field is missing, non-numeric or out of range
        """
        return validate_affordability_input(
            dto.to_raw(),
            default_max_front_end_dti=default_max_front_end_dti,
            default_max_back_end_dti=default_max_back_end_dti,
        )

    @staticmethod
    def to_response(result: AffordabilityResult) -> AffordabilityResponseDTO:
        """
        Converts domain AffordabilityResult to response DTO.

        Handles Decimal → string conversion at the boundary.
        """
        return AffordabilityResponseDTO(
            max_loan_amount=str(result.max_loan_amount),
            max_home_price=str(result.max_home_price),
            monthly_principal_and_interest=str(result.monthly_principal_and_interest),
            monthly_escrow=str(result.monthly_escrow),
            total_monthly_housing_cost=str(result.total_monthly_housing_cost),
            front_end_dti=str(result.front_end_dti),
            back_end_dti=str(result.back_end_dti),
            binding_constraint=result.binding_constraint.value,
            max_housing_payment_front_end=str(result.max_housing_payment_front_end),
            max_housing_payment_back_end=str(result.max_housing_payment_back_end),
            total_paid=str(result.total_paid),
            total_interest=str(result.total_interest),
            amortization_schedule=[to_entry_dto(entry) for entry in result.amortization_schedule],
        )
