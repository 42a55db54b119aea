from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, localcontext

from mortgage_calculator.domain.affordability import (
    DEFAULT_MAX_TERM_MONTHS,
    PaymentSchedule,
    PaymentScheduleRequest,
)
from mortgage_calculator.domain.amortization import (
    build_schedule,
    level_payment,
    monthly_rate,
    schedule_totals,
    to_cents,
)
from mortgage_calculator.domain.errors import TermTooLargeError
from mortgage_calculator.use_cases.compute_affordability import DECIMAL_PRECISION


@dataclass(frozen=True, slots=True)
class CalculatePaymentSchedule:
    """
    Amortize a known loan amount.

    The level payment is rounded to cents (ROUND_HALF_EVEN); totals are
    summed from the schedule, whose last period absorbs rounding drift.
    """

    max_term_months: int = DEFAULT_MAX_TERM_MONTHS

    def execute(self, req: PaymentScheduleRequest) -> PaymentSchedule:
        if req.loan_term_months > self.max_term_months:
            raise TermTooLargeError(req.loan_term_months, self.max_term_months)

        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            ctx.rounding = ROUND_HALF_EVEN

            loan_amount = to_cents(req.loan_amount)
            rate = monthly_rate(req.annual_interest_rate_pct)
            payment = to_cents(level_payment(loan_amount, rate, req.loan_term_months))

            schedule = build_schedule(loan_amount, payment, rate, req.loan_term_months)
            total_paid, total_interest = schedule_totals(schedule)

        return PaymentSchedule(
            loan_amount=loan_amount,
            annual_interest_rate_pct=req.annual_interest_rate_pct,
            loan_term_months=req.loan_term_months,
            monthly_payment=payment,
            total_paid=total_paid,
            total_interest=total_interest,
            schedule=schedule,
        )
