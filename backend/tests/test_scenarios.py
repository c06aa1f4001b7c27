"""Tests for side-by-side scenario comparison."""

from __future__ import annotations

import pytest

from eventbudget.engine import BudgetEngine
from eventbudget.exceptions import IncompleteParametersError, ScenarioLimitError
from eventbudget.factory import create_default_engine
from eventbudget.models.params import EventParameters
from eventbudget.services.scenarios import MAX_SCENARIOS, ScenarioComparison


@pytest.fixture()
def engine() -> BudgetEngine:
    return create_default_engine()


@pytest.fixture()
def comparison(engine: BudgetEngine) -> ScenarioComparison:
    return ScenarioComparison(engine)


def _params(city: str = "hyderabad", **overrides: object) -> EventParameters:
    fields: dict[str, object] = {
        "city": city,
        "venue_type": "conference-center",
        "catering_type": "buffet",
        "event_type": "corporate",
    }
    fields.update(overrides)
    return EventParameters(**fields)


# ---------------------------------------------------------------------------
# Adding scenarios
# ---------------------------------------------------------------------------


class TestAdd:
    def test_prices_and_names_scenarios(self, comparison: ScenarioComparison) -> None:
        first = comparison.add(_params())
        second = comparison.add(_params("mumbai"))

        assert first.name == "Scenario 1"
        assert second.name == "Scenario 2"
        assert first.result.grand_total == 5262
        assert second.result.grand_total == 7367
        assert len(comparison) == 2

    def test_explicit_name(self, comparison: ScenarioComparison) -> None:
        assert comparison.add(_params(), name="Budget option").name == "Budget option"

    def test_limit(self, comparison: ScenarioComparison) -> None:
        for _ in range(MAX_SCENARIOS):
            comparison.add(_params())

        with pytest.raises(ScenarioLimitError, match="Maximum 5 scenarios"):
            comparison.add(_params())
        assert len(comparison) == MAX_SCENARIOS

    def test_custom_limit(self, engine: BudgetEngine) -> None:
        comparison = ScenarioComparison(engine, max_scenarios=1)
        comparison.add(_params())
        with pytest.raises(ScenarioLimitError):
            comparison.add(_params())

    def test_incomplete_parameters_rejected(self, comparison: ScenarioComparison) -> None:
        with pytest.raises(IncompleteParametersError):
            comparison.add(_params(venue_type=None))
        assert len(comparison) == 0

    def test_scenarios_property_is_a_copy(self, comparison: ScenarioComparison) -> None:
        comparison.add(_params())
        comparison.scenarios.clear()
        assert len(comparison) == 1


# ---------------------------------------------------------------------------
# Removing and selecting
# ---------------------------------------------------------------------------


class TestRemoveAndSelect:
    def test_select_sets_active(self, comparison: ScenarioComparison) -> None:
        comparison.add(_params())
        second = comparison.add(_params("delhi"))

        assert comparison.select(1) is second
        assert comparison.active_index == 1

    def test_select_out_of_range(self, comparison: ScenarioComparison) -> None:
        with pytest.raises(IndexError):
            comparison.select(0)

    def test_removing_last_active_moves_selection_back(
        self, comparison: ScenarioComparison
    ) -> None:
        for city in ("hyderabad", "delhi", "pune"):
            comparison.add(_params(city))
        comparison.select(2)

        removed = comparison.remove(2)

        assert removed.params.city == "pune"
        assert comparison.active_index == 1
        assert len(comparison) == 2

    def test_removing_earlier_scenario_keeps_selection(
        self, comparison: ScenarioComparison
    ) -> None:
        for city in ("hyderabad", "delhi", "pune"):
            comparison.add(_params(city))
        comparison.select(0)

        comparison.remove(1)

        assert comparison.active_index == 0

    def test_remove_out_of_range(self, comparison: ScenarioComparison) -> None:
        with pytest.raises(IndexError):
            comparison.remove(3)

    def test_negative_index_removes_nothing(self, comparison: ScenarioComparison) -> None:
        comparison.add(_params("hyderabad"))
        comparison.add(_params("delhi"))

        with pytest.raises(IndexError, match="No scenario at index -1"):
            comparison.remove(-1)
        assert [s.params.city for s in comparison.scenarios] == ["hyderabad", "delhi"]

    def test_negative_index_cannot_be_selected(self, comparison: ScenarioComparison) -> None:
        comparison.add(_params())
        comparison.add(_params())
        comparison.select(1)

        with pytest.raises(IndexError):
            comparison.select(-1)
        assert comparison.active_index == 1

    def test_clear(self, comparison: ScenarioComparison) -> None:
        comparison.add(_params())
        comparison.add(_params())
        comparison.select(1)

        comparison.clear()

        assert len(comparison) == 0
        assert comparison.active_index == 0


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------


class TestInsights:
    def test_none_when_empty(self, comparison: ScenarioComparison) -> None:
        assert comparison.insights() is None

    def test_figures(self, comparison: ScenarioComparison) -> None:
        comparison.add(_params("mumbai"), name="Mumbai")
        comparison.add(_params("hyderabad"), name="Hyderabad")

        insights = comparison.insights()

        assert insights is not None
        assert insights.count == 2
        assert insights.min_cost == 5262
        assert insights.max_cost == 7367
        assert insights.avg_cost == pytest.approx(6314.5)
        assert insights.savings == 2105
        assert insights.cheapest == "Hyderabad"
        assert insights.most_expensive == "Mumbai"

    def test_single_scenario_has_no_savings(self, comparison: ScenarioComparison) -> None:
        comparison.add(_params())
        insights = comparison.insights()
        assert insights is not None
        assert insights.savings == 0
        assert insights.cheapest == insights.most_expensive
