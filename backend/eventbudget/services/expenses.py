"""Custom expenses layered on top of a calculated budget."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING

from eventbudget.engine import round_half_up
from eventbudget.models.budget import BudgetResult, LineItem
from eventbudget.models.enums import ExpenseCategory

if TYPE_CHECKING:
    from collections.abc import Iterable

    from eventbudget.models.budget import CustomExpense

logger = logging.getLogger(__name__)


def apply_custom_expenses(
    result: BudgetResult,
    expenses: Iterable[CustomExpense],
) -> BudgetResult:
    """Return a new budget with each expense appended to its category.

    Amounts are rounded like engine line items. The contingency line is
    left as calculated; it does not grow with custom expenses.
    """
    additions: dict[ExpenseCategory, list[LineItem]] = defaultdict(list)
    for expense in expenses:
        additions[expense.category].append(
            LineItem(
                name=expense.name,
                cost=round_half_up(expense.amount),
                description=expense.description or "Custom expense",
            )
        )

    if not additions:
        return result

    logger.debug(
        "Applying %d custom expense(s)", sum(len(v) for v in additions.values())
    )
    categories = {
        category: breakdown.with_items(additions.get(category, ()))
        for category, breakdown in result.categories().items()
    }
    return BudgetResult.from_categories(
        venue=categories[ExpenseCategory.VENUE],
        catering=categories[ExpenseCategory.CATERING],
        services=categories[ExpenseCategory.SERVICES],
        miscellaneous=categories[ExpenseCategory.MISCELLANEOUS],
    )
