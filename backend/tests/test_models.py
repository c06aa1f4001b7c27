"""Tests for the input and output domain models."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from eventbudget.models.budget import (
    BudgetResult,
    CategoryBreakdown,
    CustomExpense,
    LineItem,
)
from eventbudget.models.enums import ExpenseCategory
from eventbudget.models.params import DashboardData, EventParameters

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _breakdown(*costs: int) -> CategoryBreakdown:
    return CategoryBreakdown.from_items(
        LineItem(name=f"Item {i}", cost=c) for i, c in enumerate(costs)
    )


def _result() -> BudgetResult:
    return BudgetResult.from_categories(
        venue=_breakdown(1500, 200, 80),
        catering=_breakdown(2250, 405, 212),
        services=_breakdown(),
        miscellaneous=_breakdown(465, 150),
    )


# ---------------------------------------------------------------------------
# EventParameters
# ---------------------------------------------------------------------------


class TestEventParameters:
    def test_defaults(self) -> None:
        params = EventParameters()
        assert params.city is None
        assert params.audience_size == 50
        assert params.duration == 4.0
        assert params.setup_time == 2.0
        assert params.cleanup_time == 1.0
        assert params.additional_services == ()
        assert not params.is_complete

    def test_accepts_camel_case_keys(self) -> None:
        params = EventParameters.model_validate(
            {
                "city": "pune",
                "venueType": "restaurant",
                "cateringType": "cocktail",
                "audienceSize": 80,
                "eventType": "birthday",
                "additionalServices": ["music", "flowers"],
            }
        )
        assert params.venue_type == "restaurant"
        assert params.catering_type == "cocktail"
        assert params.audience_size == 80
        assert params.additional_services == ("music", "flowers")
        assert params.is_complete

    def test_accepts_snake_case_keys(self) -> None:
        params = EventParameters.model_validate({"venue_type": "restaurant"})
        assert params.venue_type == "restaurant"

    def test_numeric_fields_are_not_range_checked(self) -> None:
        params = EventParameters(audience_size=-5, duration=-1)
        assert params.audience_size == -5

    def test_is_immutable(self) -> None:
        params = EventParameters(city="pune")
        with pytest.raises(ValidationError):
            params.city = "delhi"  # type: ignore[misc]

    def test_unknown_codes_are_kept(self) -> None:
        params = EventParameters(city="atlantis", venue_type="castle")
        assert params.city == "atlantis"

    @pytest.mark.parametrize("field", ["duration", "setup_time", "cleanup_time"])
    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_numbers_rejected(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError, match="finite number"):
            EventParameters(**{field: value})

    def test_non_finite_audience_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EventParameters(audience_size=math.inf)  # type: ignore[arg-type]


class TestDashboardData:
    def test_defaults(self) -> None:
        data = DashboardData()
        assert data.event_type == ""
        assert data.audience_size == 50
        assert data.budget == 0
        assert data.selected_functions == ()


# ---------------------------------------------------------------------------
# CategoryBreakdown / BudgetResult invariants
# ---------------------------------------------------------------------------


class TestCategoryBreakdown:
    def test_from_items_sums_costs(self) -> None:
        breakdown = _breakdown(100, 250, 0)
        assert breakdown.total == 350
        assert len(breakdown.items) == 3

    def test_rejects_mismatched_total(self) -> None:
        with pytest.raises(ValidationError, match="does not match item sum"):
            CategoryBreakdown(total=5, items=(LineItem(name="a", cost=3),))

    def test_empty_breakdown(self) -> None:
        assert CategoryBreakdown() == CategoryBreakdown(total=0, items=())

    def test_with_items_appends(self) -> None:
        extended = _breakdown(100).with_items([LineItem(name="Extra", cost=50)])
        assert extended.total == 150
        assert [i.name for i in extended.items] == ["Item 0", "Extra"]


class TestBudgetResult:
    def test_from_categories_computes_grand_total(self) -> None:
        assert _result().grand_total == 5262

    def test_rejects_mismatched_grand_total(self) -> None:
        with pytest.raises(ValidationError, match="does not match category sum"):
            BudgetResult(venue=_breakdown(100), grand_total=99)

    def test_empty(self) -> None:
        empty = BudgetResult.empty()
        assert empty.grand_total == 0
        assert all(b.items == () for b in empty.categories().values())

    def test_categories_in_display_order(self) -> None:
        assert list(_result().categories()) == [
            ExpenseCategory.VENUE,
            ExpenseCategory.CATERING,
            ExpenseCategory.SERVICES,
            ExpenseCategory.MISCELLANEOUS,
        ]

    def test_json_round_trip(self) -> None:
        result = _result()
        assert BudgetResult.model_validate_json(result.model_dump_json()) == result


class TestDerivedMetrics:
    def test_per_guest(self) -> None:
        assert _result().per_guest(50) == pytest.approx(105.24)

    def test_per_hour(self) -> None:
        assert _result().per_hour(4) == pytest.approx(1315.5)

    @pytest.mark.parametrize("divisor", [0, -3])
    def test_guarded_division(self, divisor: float) -> None:
        assert _result().per_guest(divisor) == 0.0
        assert _result().per_hour(divisor) == 0.0

    def test_category_shares(self) -> None:
        shares = _result().category_shares()

        # Services is zero and left out
        assert [s.name for s in shares] == ["Venue", "Catering", "Miscellaneous"]
        assert [s.value for s in shares] == [1780, 2867, 615]
        assert [s.percentage for s in shares] == [33.8, 54.5, 11.7]

    def test_no_shares_for_empty_budget(self) -> None:
        assert BudgetResult.empty().category_shares() == []


# ---------------------------------------------------------------------------
# CustomExpense
# ---------------------------------------------------------------------------


class TestCustomExpense:
    def test_defaults_to_miscellaneous(self) -> None:
        expense = CustomExpense(name="Decor", amount=500)
        assert expense.category == ExpenseCategory.MISCELLANEOUS
        assert expense.description == ""

    def test_name_is_stripped(self) -> None:
        assert CustomExpense(name="  Decor ", amount=1).name == "Decor"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name: str) -> None:
        with pytest.raises(ValidationError, match="Expense name is required"):
            CustomExpense(name=name, amount=100)

    @pytest.mark.parametrize("amount", [0, -50])
    def test_non_positive_amount_rejected(self, amount: float) -> None:
        with pytest.raises(ValidationError):
            CustomExpense(name="Decor", amount=amount)

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CustomExpense(name="Decor", amount=10, category="fun")  # type: ignore[arg-type]
