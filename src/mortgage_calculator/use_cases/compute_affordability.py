from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from mortgage_calculator.domain.affordability import (
    DEFAULT_MAX_TERM_MONTHS,
    AffordabilityRequest,
    AffordabilityResult,
    BindingConstraint,
)
from mortgage_calculator.domain.amortization import (
    ZERO,
    build_schedule,
    monthly_rate,
    present_value,
    schedule_totals,
    to_cents,
)
from mortgage_calculator.domain.errors import TermTooLargeError

logger = logging.getLogger(__name__)

DECIMAL_PRECISION = 28
RATIO_QUANTUM = Decimal("0.0001")


@dataclass(frozen=True, slots=True)
class ComputeAffordability:
    """
    Determine the largest loan a borrower can carry and how it amortizes.

    Steps:
    1. Monthly rate r = annual_interest_rate_pct / 100 / 12
    2. Escrow = (property tax + insurance) / 12 + HOA, independent of the loan
    3. Front-end ceiling = monthly income * max_front_end_dti
       Back-end ceiling = monthly income * max_back_end_dti - monthly debts
       The lower one binds; a negative ceiling clamps to zero
    4. P&I budget = binding ceiling - escrow (never below zero), inverted
       through the amortization formula to get the maximum loan
    5. Schedule generated from the rounded loan and payment
    6. Achieved DTIs recomputed from the rounded payment

    Rounding policy:
    - Full context precision for intermediate values
    - Payment, escrow, loan amount and every schedule component rounded to
      cents with ROUND_HALF_EVEN
    - DTI ratios rounded to 4 places

    Degenerate inputs (debts exceeding the budget, zero rate) produce a valid
    result rather than an error. Only an oversized term is rejected.
    """

    max_term_months: int = DEFAULT_MAX_TERM_MONTHS

    def execute(self, req: AffordabilityRequest) -> AffordabilityResult:
        if req.loan_term_months > self.max_term_months:
            raise TermTooLargeError(req.loan_term_months, self.max_term_months)

        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            ctx.rounding = ROUND_HALF_EVEN
            result = self._compute(req)

        logger.debug(
            "Affordability computed",
            extra={
                "binding_constraint": result.binding_constraint.value,
                "max_loan_amount": str(result.max_loan_amount),
                "loan_term_months": req.loan_term_months,
            },
        )
        return result

    def _compute(self, req: AffordabilityRequest) -> AffordabilityResult:
        rate = monthly_rate(req.annual_interest_rate_pct)
        monthly_income = req.annual_income / Decimal("12")

        monthly_escrow = to_cents(
            (req.property_tax_annual + req.home_insurance_annual) / Decimal("12") + req.hoa_monthly
        )

        front_end_ceiling = to_cents(monthly_income * req.max_front_end_dti)
        back_end_ceiling = to_cents(monthly_income * req.max_back_end_dti - req.monthly_debts)

        if back_end_ceiling < front_end_ceiling:
            binding_constraint = BindingConstraint.BACK_END
            binding_payment = back_end_ceiling
        else:
            binding_constraint = BindingConstraint.FRONT_END
            binding_payment = front_end_ceiling

        binding_payment = max(ZERO, binding_payment)
        payment = max(ZERO, binding_payment - monthly_escrow)

        max_loan_amount = max(ZERO, to_cents(present_value(payment, rate, req.loan_term_months)))

        schedule = build_schedule(max_loan_amount, payment, rate, req.loan_term_months)
        total_paid, total_interest = schedule_totals(schedule)

        total_housing = payment + monthly_escrow
        if monthly_income > 0:
            front_end_dti = (total_housing / monthly_income).quantize(RATIO_QUANTUM)
            back_end_dti = ((total_housing + req.monthly_debts) / monthly_income).quantize(
                RATIO_QUANTUM
            )
        else:
            front_end_dti = back_end_dti = Decimal("0.0000")

        return AffordabilityResult(
            max_loan_amount=max_loan_amount,
            max_home_price=max_loan_amount + req.down_payment,
            monthly_principal_and_interest=payment,
            monthly_escrow=monthly_escrow,
            total_monthly_housing_cost=total_housing,
            front_end_dti=front_end_dti,
            back_end_dti=back_end_dti,
            binding_constraint=binding_constraint,
            max_housing_payment_front_end=front_end_ceiling,
            max_housing_payment_back_end=back_end_ceiling,
            total_paid=total_paid,
            total_interest=total_interest,
            amortization_schedule=schedule,
        )
