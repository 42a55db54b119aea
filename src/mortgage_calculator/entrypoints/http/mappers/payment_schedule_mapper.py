from __future__ import annotations

from mortgage_calculator.domain.affordability import PaymentSchedule, PaymentScheduleRequest
from mortgage_calculator.domain.validation import validate_payment_schedule_input
from mortgage_calculator.entrypoints.http.dtos.payment_schedule import (
    PaymentScheduleRequestDTO,
    PaymentScheduleResponseDTO,
)
from mortgage_calculator.entrypoints.http.mappers.affordability_mapper import to_entry_dto


class PaymentScheduleMapper:
    """Maps between REST DTOs and domain models for payment schedules."""

    @staticmethod
    def to_domain_request(dto: PaymentScheduleRequestDTO) -> PaymentScheduleRequest:
        return validate_payment_schedule_input(dto.to_raw())

    @staticmethod
    def to_response(plan: PaymentSchedule) -> PaymentScheduleResponseDTO:
        return PaymentScheduleResponseDTO(
            loan_amount=str(plan.loan_amount),
            annual_interest_rate_pct=str(plan.annual_interest_rate_pct),
            loan_term_months=plan.loan_term_months,
            monthly_payment=str(plan.monthly_payment),
            total_paid=str(plan.total_paid),
            total_interest=str(plan.total_interest),
            schedule=[to_entry_dto(entry) for entry in plan.schedule],
        )
