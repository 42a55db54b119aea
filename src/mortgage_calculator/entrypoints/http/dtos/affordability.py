from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool


# Numbers are accepted loosely (JSON number or numeric string) and checked by
# the domain validator, which reports MISSING / NOT_A_NUMBER / OUT_OF_RANGE.
# StrictBool keeps JSON booleans as bools so they are rejected there instead
# of being coerced to 0 or 1.
RawNumber = Union[StrictBool, str, int, float, None]


class AffordabilityRequestDTO(BaseModel):
    """Request payload for the affordability calculation."""

    annual_income: RawNumber = Field(
        default=None,
        description="Gross annual income. Required, > 0",
        examples=["120000.00"],
    )
    monthly_debts: RawNumber = Field(
        default=None,
        description="Existing recurring monthly obligations, excluding this mortgage. Default 0",
        examples=["500.00"],
    )
    down_payment: RawNumber = Field(
        default=None,
        description="Cash available as down payment. Default 0",
        examples=["40000.00"],
    )
    annual_interest_rate_pct: RawNumber = Field(
        default=None,
        description="Nominal annual interest rate in percent (6.5 means 6.5%). Required, >= 0",
        examples=["6.0"],
    )
    loan_term_months: RawNumber = Field(
        default=None,
        description="Loan term as a whole number of months. Required, >= 1",
        examples=[360],
    )
    property_tax_annual: RawNumber = Field(
        default=None,
        description="Annual property tax. Default 0",
        examples=["3600.00"],
    )
    home_insurance_annual: RawNumber = Field(
        default=None,
        description="Annual homeowner's insurance. Default 0",
        examples=["1200.00"],
    )
    hoa_monthly: RawNumber = Field(
        default=None,
        description="Monthly HOA dues. Default 0",
        examples=["0"],
    )
    max_front_end_dti: RawNumber = Field(
        default=None,
        description="Housing-cost-to-income ceiling in (0, 1]. Default 0.28",
        examples=["0.28"],
    )
    max_back_end_dti: RawNumber = Field(
        default=None,
        description="Total-debt-to-income ceiling in (0, 1]. Default 0.36",
        examples=["0.36"],
    )

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "annual_income": "120000.00",
                "monthly_debts": "500.00",
                "down_payment": "40000.00",
                "annual_interest_rate_pct": "6.0",
                "loan_term_months": 360,
                "property_tax_annual": "3600.00",
                "home_insurance_annual": "1200.00",
                "hoa_monthly": "0",
                "max_front_end_dti": "0.28",
                "max_back_end_dti": "0.36",
            }
        },
    )

    def to_raw(self) -> dict[str, Any]:
        """Field values exactly as received; absent fields are None."""
        return self.model_dump()


class AmortizationEntryDTO(BaseModel):
    period_index: int
    payment_amount: str
    principal_portion: str
    interest_portion: str
    remaining_balance: str


class AffordabilityResponseDTO(BaseModel):
    """Affordability result. Monetary values and ratios are decimal strings."""

    max_loan_amount: str = Field(description="Largest affordable loan", examples=["400299.87"])
    max_home_price: str = Field(
        description="max_loan_amount + down_payment", examples=["440299.87"]
    )
    monthly_principal_and_interest: str = Field(examples=["2400.00"])
    monthly_escrow: str = Field(
        description="Property tax and insurance per month plus HOA", examples=["400.00"]
    )
    total_monthly_housing_cost: str = Field(examples=["2800.00"])
    front_end_dti: str = Field(description="Achieved housing ratio", examples=["0.2800"])
    back_end_dti: str = Field(description="Achieved total debt ratio", examples=["0.3300"])
    binding_constraint: str = Field(
        description="Which ceiling determined the result: FRONT_END or BACK_END",
        examples=["FRONT_END"],
    )
    max_housing_payment_front_end: str = Field(examples=["2800.00"])
    max_housing_payment_back_end: str = Field(examples=["3100.00"])
    total_paid: str = Field(description="Sum of all scheduled payments")
    total_interest: str = Field(description="Sum of all interest portions")
    amortization_schedule: list[AmortizationEntryDTO]
