from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mortgage_calculator.entrypoints.http.dtos.affordability import (
    AmortizationEntryDTO,
    RawNumber,
)


class PaymentScheduleRequestDTO(BaseModel):
    """Request payload for amortizing a known loan amount."""

    loan_amount: RawNumber = Field(
        default=None,
        description="Principal to amortize. Required, >= 0",
        examples=["300000.00"],
    )
    annual_interest_rate_pct: RawNumber = Field(
        default=None,
        description="Nominal annual interest rate in percent. Required, >= 0",
        examples=["6.5"],
    )
    loan_term_months: RawNumber = Field(
        default=None,
        description="Loan term as a whole number of months. Required, >= 1",
        examples=[360],
    )

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "loan_amount": "300000.00",
                "annual_interest_rate_pct": "6.5",
                "loan_term_months": 360,
            }
        },
    )

    def to_raw(self) -> dict[str, Any]:
        return self.model_dump()


class PaymentScheduleResponseDTO(BaseModel):
    loan_amount: str = Field(examples=["300000.00"])
    annual_interest_rate_pct: str = Field(examples=["6.5"])
    loan_term_months: int = Field(examples=[360])
    monthly_payment: str = Field(examples=["1896.20"])
    total_paid: str
    total_interest: str
    schedule: list[AmortizationEntryDTO]
