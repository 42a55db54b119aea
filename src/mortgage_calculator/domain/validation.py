"""Input validation for calculator requests.

Turns a raw mapping (typically a deserialized JSON body) into a typed,
range-checked domain request. Every failing field is collected before
raising, so callers can show all problems in one round trip.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from mortgage_calculator.domain.affordability import (
    DEFAULT_MAX_BACK_END_DTI,
    DEFAULT_MAX_FRONT_END_DTI,
    MAX_ANNUAL_INTEREST_RATE_PCT,
    MAX_MONEY_AMOUNT,
    AffordabilityRequest,
    PaymentScheduleRequest,
)
from mortgage_calculator.domain.errors import ValidationError, ValidationReason


_ZERO = Decimal("0")
_ONE = Decimal("1")

_OPTIONAL_MONEY_FIELDS = (
    "monthly_debts",
    "down_payment",
    "property_tax_annual",
    "home_insurance_annual",
    "hoa_monthly",
)


def _error(field: str, reason: ValidationReason, message: str) -> dict[str, str]:
    return {"field": field, "message": message, "code": reason.value}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class _FieldReader:
    """Reads fields out of a raw mapping, recording failures instead of raising."""

    def __init__(self, raw: Mapping[str, Any]) -> None:
        self.raw = raw
        self.errors: list[dict[str, str]] = []

    def decimal(self, field: str, default: Decimal | None = None) -> Decimal | None:
        value = self.raw.get(field)

        if _is_blank(value):
            if default is None:
                self.errors.append(_error(field, ValidationReason.MISSING, f"{field} is required"))
            return default

        if isinstance(value, bool):
            self._not_a_number(field, value)
            return None

        try:
            number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            self._not_a_number(field, value)
            return None

        if not number.is_finite():
            self._not_a_number(field, value)
            return None

        return number

    def whole_months(self, field: str) -> int | None:
        number = self.decimal(field)
        if number is None:
            return None

        if number != number.to_integral_value():
            self.out_of_range(field, f"{field} must be a whole number of months")
            return None
        if number < 1:
            self.out_of_range(field, f"{field} must be at least 1")
            return None

        return int(number)

    def out_of_range(self, field: str, message: str) -> None:
        self.errors.append(_error(field, ValidationReason.OUT_OF_RANGE, message))

    def _not_a_number(self, field: str, value: Any) -> None:
        self.errors.append(
            _error(field, ValidationReason.NOT_A_NUMBER, f"{field} must be a valid number: {value!r}")
        )


def _require_positive(reader: _FieldReader, field: str, value: Decimal | None) -> None:
    if value is not None and value <= _ZERO:
        reader.out_of_range(field, f"{field} must be greater than 0")


def _require_non_negative(reader: _FieldReader, field: str, value: Decimal | None) -> None:
    if value is not None and value < _ZERO:
        reader.out_of_range(field, f"{field} must be greater than or equal to 0")


def _require_below(reader: _FieldReader, field: str, value: Decimal | None, limit: Decimal) -> None:
    if value is not None and value >= limit:
        reader.out_of_range(field, f"{field} must be less than {limit:,}")


def _require_ratio(reader: _FieldReader, field: str, value: Decimal | None) -> None:
    if value is not None and not (_ZERO < value <= _ONE):
        reader.out_of_range(field, f"{field} must be greater than 0 and at most 1")


def validate_affordability_input(
    raw: Mapping[str, Any],
    *,
    default_max_front_end_dti: Decimal = DEFAULT_MAX_FRONT_END_DTI,
    default_max_back_end_dti: Decimal = DEFAULT_MAX_BACK_END_DTI,
) -> AffordabilityRequest:
    """
    Build an AffordabilityRequest from raw input.

    Required: annual_income, annual_interest_rate_pct, loan_term_months.
    Optional money fields default to 0; DTI ceilings fall back to the given
    defaults. The two ceilings are accepted in any order. Money fields must
    stay below MAX_MONEY_AMOUNT and the rate below MAX_ANNUAL_INTEREST_RATE_PCT.

    Raises:
        ValidationError: listing every failing field with a reason code
    """
    reader = _FieldReader(raw)

    annual_income = reader.decimal("annual_income")
    _require_positive(reader, "annual_income", annual_income)
    _require_below(reader, "annual_income", annual_income, MAX_MONEY_AMOUNT)

    rate_pct = reader.decimal("annual_interest_rate_pct")
    _require_non_negative(reader, "annual_interest_rate_pct", rate_pct)
    _require_below(reader, "annual_interest_rate_pct", rate_pct, MAX_ANNUAL_INTEREST_RATE_PCT)

    term_months = reader.whole_months("loan_term_months")

    money: dict[str, Decimal | None] = {}
    for field in _OPTIONAL_MONEY_FIELDS:
        money[field] = reader.decimal(field, default=_ZERO)
        _require_non_negative(reader, field, money[field])
        _require_below(reader, field, money[field], MAX_MONEY_AMOUNT)

    front_end = reader.decimal("max_front_end_dti", default=default_max_front_end_dti)
    _require_ratio(reader, "max_front_end_dti", front_end)

    back_end = reader.decimal("max_back_end_dti", default=default_max_back_end_dti)
    _require_ratio(reader, "max_back_end_dti", back_end)

    if reader.errors:
        raise ValidationError(errors=reader.errors)

    return AffordabilityRequest(
        annual_income=annual_income,  # type: ignore[arg-type]
        annual_interest_rate_pct=rate_pct,  # type: ignore[arg-type]
        loan_term_months=term_months,  # type: ignore[arg-type]
        max_front_end_dti=front_end,  # type: ignore[arg-type]
        max_back_end_dti=back_end,  # type: ignore[arg-type]
        **money,  # type: ignore[arg-type]
    )


def validate_payment_schedule_input(raw: Mapping[str, Any]) -> PaymentScheduleRequest:
    """
    Build a PaymentScheduleRequest from raw input.

    All three fields are required. A zero loan amount is allowed and yields
    an all-zero schedule.

    Raises:
        ValidationError: listing every failing field with a reason code
    """
    reader = _FieldReader(raw)

    loan_amount = reader.decimal("loan_amount")
    _require_non_negative(reader, "loan_amount", loan_amount)
    _require_below(reader, "loan_amount", loan_amount, MAX_MONEY_AMOUNT)

    rate_pct = reader.decimal("annual_interest_rate_pct")
    _require_non_negative(reader, "annual_interest_rate_pct", rate_pct)
    _require_below(reader, "annual_interest_rate_pct", rate_pct, MAX_ANNUAL_INTEREST_RATE_PCT)

    term_months = reader.whole_months("loan_term_months")

    if reader.errors:
        raise ValidationError(errors=reader.errors)

    return PaymentScheduleRequest(
        loan_amount=loan_amount,  # type: ignore[arg-type]
        annual_interest_rate_pct=rate_pct,  # type: ignore[arg-type]
        loan_term_months=term_months,  # type: ignore[arg-type]
    )
