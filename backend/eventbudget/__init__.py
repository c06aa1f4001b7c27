"""Event budget calculation engine.

Usage::

    from eventbudget import create_default_engine, EventParameters

    engine = create_default_engine()
    budget = engine.calculate(
        EventParameters(
            city="hyderabad",
            event_type="corporate",
            venue_type="conference-center",
            catering_type="buffet",
        )
    )
"""

from eventbudget.engine import BudgetEngine, round_half_up
from eventbudget.exceptions import (
    EventBudgetError,
    IncompleteParametersError,
    InvalidParameterError,
    ScenarioLimitError,
    UnknownTemplateError,
)
from eventbudget.factory import create_default_engine
from eventbudget.models.budget import (
    BudgetResult,
    CategoryBreakdown,
    CategoryShare,
    CustomExpense,
    LineItem,
)
from eventbudget.models.enums import (
    CateringType,
    City,
    EventType,
    ExpenseCategory,
    ServiceCode,
    VenueType,
)
from eventbudget.models.params import DashboardData, EventParameters

__all__ = [
    "BudgetEngine",
    "BudgetResult",
    "CategoryBreakdown",
    "CategoryShare",
    "CateringType",
    "City",
    "CustomExpense",
    "DashboardData",
    "EventBudgetError",
    "EventParameters",
    "EventType",
    "ExpenseCategory",
    "IncompleteParametersError",
    "InvalidParameterError",
    "LineItem",
    "ScenarioLimitError",
    "ServiceCode",
    "UnknownTemplateError",
    "VenueType",
    "create_default_engine",
    "round_half_up",
]
