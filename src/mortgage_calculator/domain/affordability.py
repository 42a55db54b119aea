from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


DEFAULT_MAX_FRONT_END_DTI = Decimal("0.28")
DEFAULT_MAX_BACK_END_DTI = Decimal("0.36")
DEFAULT_MAX_TERM_MONTHS = 1200

# Upper bounds on caller input; they keep every intermediate value within
# the working decimal precision.
MAX_MONEY_AMOUNT = Decimal("1000000000000000")
MAX_ANNUAL_INTEREST_RATE_PCT = Decimal("1000")


class BindingConstraint(str, Enum):
    """Which DTI ceiling determined the maximum housing payment."""

    FRONT_END = "FRONT_END"
    BACK_END = "BACK_END"


@dataclass(frozen=True, slots=True)
class AffordabilityRequest:
    """Validated borrower inputs.

    Built by the validator; the engine trusts the ranges documented here and
    does not re-check them:

    - annual_income > 0, every money field >= 0, all below MAX_MONEY_AMOUNT
    - 0 <= annual_interest_rate_pct < MAX_ANNUAL_INTEREST_RATE_PCT
    - loan_term_months >= 1
    - 0 < each DTI ceiling <= 1; their relative order is not enforced
    """

    annual_income: Decimal
    annual_interest_rate_pct: Decimal
    loan_term_months: int
    monthly_debts: Decimal = Decimal("0")
    down_payment: Decimal = Decimal("0")
    property_tax_annual: Decimal = Decimal("0")
    home_insurance_annual: Decimal = Decimal("0")
    hoa_monthly: Decimal = Decimal("0")
    max_front_end_dti: Decimal = DEFAULT_MAX_FRONT_END_DTI
    max_back_end_dti: Decimal = DEFAULT_MAX_BACK_END_DTI


@dataclass(frozen=True, slots=True)
class AmortizationEntry:
    period_index: int
    payment_amount: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True, slots=True)
class AffordabilityResult:
    max_loan_amount: Decimal
    max_home_price: Decimal
    monthly_principal_and_interest: Decimal
    monthly_escrow: Decimal
    total_monthly_housing_cost: Decimal
    front_end_dti: Decimal
    back_end_dti: Decimal
    binding_constraint: BindingConstraint
    max_housing_payment_front_end: Decimal
    max_housing_payment_back_end: Decimal
    total_paid: Decimal
    total_interest: Decimal
    amortization_schedule: tuple[AmortizationEntry, ...]


@dataclass(frozen=True, slots=True)
class PaymentScheduleRequest:
    """A concrete loan to amortize."""

    loan_amount: Decimal
    annual_interest_rate_pct: Decimal
    loan_term_months: int


@dataclass(frozen=True, slots=True)
class PaymentSchedule:
    loan_amount: Decimal
    annual_interest_rate_pct: Decimal
    loan_term_months: int
    monthly_payment: Decimal
    total_paid: Decimal
    total_interest: Decimal
    schedule: tuple[AmortizationEntry, ...]
