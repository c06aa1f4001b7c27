"""Domain models for the eventbudget engine."""

from eventbudget.models.budget import (
    CATEGORY_LABELS,
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
    "CATEGORY_LABELS",
    "BudgetResult",
    "CategoryBreakdown",
    "CategoryShare",
    "CateringType",
    "City",
    "CustomExpense",
    "DashboardData",
    "EventParameters",
    "EventType",
    "ExpenseCategory",
    "LineItem",
    "ServiceCode",
    "VenueType",
]
