"""Factory functions for creating pre-configured BudgetEngine instances."""

from __future__ import annotations

from eventbudget.data.pricing import DEFAULT_PRICING
from eventbudget.data.repository import PricingRepository
from eventbudget.engine import BudgetEngine


def create_default_engine(*, strict: bool = False) -> BudgetEngine:
    """Create a BudgetEngine wired up with the built-in pricing tables.

    Args:
        strict: Reject out-of-range numeric parameters instead of pricing
            them as given.

    Returns:
        A BudgetEngine ready to calculate budgets.

    Example::

        from eventbudget import create_default_engine, EventParameters

        engine = create_default_engine()
        budget = engine.calculate(EventParameters(city="pune", ...))
    """
    repository = PricingRepository(DEFAULT_PRICING)
    return BudgetEngine(repository, strict=strict)
