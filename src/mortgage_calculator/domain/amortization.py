"""Fixed-rate amortization arithmetic.

All helpers work on Decimal and are pure. Callers are expected to run them
under a local decimal context (see the use cases) so results do not depend
on the thread's ambient context.

Rounding policy:
- Intermediate values keep full context precision; annuity factors get
  extra guard digits so tiny rates are not rounded away
- Money is rounded to cents with ROUND_HALF_EVEN (banker's rounding)
- Each period's interest is rounded before the balance is reduced
- The final period pays off whatever balance is left, so the schedule
  always closes at exactly zero
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, getcontext, localcontext

from mortgage_calculator.domain.affordability import AmortizationEntry


CENT = Decimal("0.01")
ZERO = Decimal("0.00")

_ONE = Decimal("1")


def to_cents(value: Decimal) -> Decimal:
    ctx = getcontext()
    # quantize needs room for every integer digit plus the two decimals
    if value.adjusted() + 3 > ctx.prec:
        ctx = ctx.copy()
        ctx.prec = value.adjusted() + 3
    return value.quantize(CENT, rounding=ROUND_HALF_EVEN, context=ctx)


def monthly_rate(annual_interest_rate_pct: Decimal) -> Decimal:
    """Convert a nominal annual percentage (6.5 means 6.5%) to a monthly fraction."""
    return annual_interest_rate_pct / Decimal("100") / Decimal("12")


def _is_negligible(rate: Decimal, term_months: int) -> bool:
    """True when interest over the whole term is below the working precision.

    The annuity factor then equals the linear one to every digit we carry.
    """
    return rate == 0 or (rate * term_months).adjusted() < -getcontext().prec


def _guard_digits(rate: Decimal, term_months: int) -> int:
    # (1+r)^n loses one digit of r per leading zero; n adds its own digits
    return max(0, -rate.adjusted()) + len(str(term_months)) + 2


def present_value(payment: Decimal, rate: Decimal, term_months: int) -> Decimal:
    """Principal that a level ``payment`` retires over ``term_months`` at ``rate``.

    Inverse of :func:`level_payment`: L = P * (1 - (1+r)^-n) / r, or P * n when
    the rate is zero or too small to register. Not rounded.
    """
    if _is_negligible(rate, term_months):
        return payment * term_months

    with localcontext() as ctx:
        ctx.prec += _guard_digits(rate, term_months)
        value = payment * (_ONE - (_ONE + rate) ** -term_months) / rate

    return +value


def level_payment(principal: Decimal, rate: Decimal, term_months: int) -> Decimal:
    """Level monthly payment that retires ``principal`` over ``term_months``.

    P = L * r * (1+r)^n / ((1+r)^n - 1), or L / n when the rate is zero or too
    small to register. Not rounded.
    """
    if _is_negligible(rate, term_months):
        return principal / term_months

    with localcontext() as ctx:
        ctx.prec += _guard_digits(rate, term_months)
        factor = (_ONE + rate) ** term_months
        value = principal * (rate * factor) / (factor - _ONE)

    return +value


def build_schedule(
    principal: Decimal,
    payment: Decimal,
    rate: Decimal,
    term_months: int,
) -> tuple[AmortizationEntry, ...]:
    """Split a level payment into interest and principal for every period.

    ``principal`` and ``payment`` must already be in cents. A zero principal
    yields ``term_months`` all-zero entries.
    """
    balance = to_cents(principal)
    entries: list[AmortizationEntry] = []

    for period in range(1, term_months + 1):
        interest = to_cents(balance * rate)

        if period == term_months:
            # Final period absorbs the accumulated rounding drift
            principal_portion = balance
        else:
            principal_portion = max(ZERO, min(payment - interest, balance))

        balance = balance - principal_portion

        entries.append(
            AmortizationEntry(
                period_index=period,
                payment_amount=principal_portion + interest,
                principal_portion=principal_portion,
                interest_portion=interest,
                remaining_balance=balance,
            )
        )

    return tuple(entries)


def schedule_totals(schedule: tuple[AmortizationEntry, ...]) -> tuple[Decimal, Decimal]:
    """Return ``(total_paid, total_interest)`` over a schedule."""
    total_paid = sum((entry.payment_amount for entry in schedule), start=ZERO)
    total_interest = sum((entry.interest_portion for entry in schedule), start=ZERO)
    return total_paid, total_interest
