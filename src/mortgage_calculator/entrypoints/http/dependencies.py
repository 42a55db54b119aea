"""
Dependency injection for FastAPI routes.

The calculators are stateless, so they are cheap to build per request.
Only the settings object is cached.
"""

from __future__ import annotations

from fastapi import Depends

from mortgage_calculator.infra.config import Settings, get_settings
from mortgage_calculator.use_cases.calculate_payment_schedule import CalculatePaymentSchedule
from mortgage_calculator.use_cases.compute_affordability import ComputeAffordability


def get_compute_affordability_use_case(
    settings: Settings = Depends(get_settings),
) -> ComputeAffordability:
    """
    Factory function that returns a configured ComputeAffordability use case.

    Args:
        settings: Application settings (injected by FastAPI via Depends(get_settings))

    Returns:
        ComputeAffordability: Use case bounded by the configured max term
    """
    return ComputeAffordability(max_term_months=settings.max_term_months)


def get_calculate_payment_schedule_use_case(
    settings: Settings = Depends(get_settings),
) -> CalculatePaymentSchedule:
    """Factory function that returns a configured CalculatePaymentSchedule use case."""
    return CalculatePaymentSchedule(max_term_months=settings.max_term_months)
