"""Side-by-side comparison of alternative budget scenarios."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from eventbudget.exceptions import IncompleteParametersError, ScenarioLimitError
from eventbudget.models.budget import BudgetResult  # noqa: TCH001 (pydantic resolves at runtime)
from eventbudget.models.params import EventParameters  # noqa: TCH001

if TYPE_CHECKING:
    from eventbudget.engine import BudgetEngine

logger = logging.getLogger(__name__)

MAX_SCENARIOS = 5


class Scenario(BaseModel):
    """A named set of parameters together with its calculated budget."""

    name: str
    params: EventParameters
    result: BudgetResult
    created_at: datetime = Field(default_factory=datetime.now)


class ScenarioInsights(BaseModel):
    """Aggregate figures across the scenarios being compared."""

    count: int
    min_cost: int
    max_cost: int
    avg_cost: float
    savings: int
    cheapest: str
    most_expensive: str


class ScenarioComparison:
    """Holds up to ``max_scenarios`` budgets for comparison.

    Args:
        engine: Engine used to price each scenario as it is added.
        max_scenarios: Upper bound on stored scenarios.
    """

    def __init__(self, engine: BudgetEngine, max_scenarios: int = MAX_SCENARIOS) -> None:
        self._engine = engine
        self._max_scenarios = max_scenarios
        self._scenarios: list[Scenario] = []
        self.active_index = 0

    @property
    def scenarios(self) -> list[Scenario]:
        return list(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)

    def add(self, params: EventParameters, name: str | None = None) -> Scenario:
        """Price ``params`` and store it as a new scenario.

        Raises:
            IncompleteParametersError: If city, event type or venue type is unset.
            ScenarioLimitError: If the comparison is already full.
        """
        if not params.is_complete:
            msg = "City, event type and venue type are required to add a scenario"
            raise IncompleteParametersError(msg)
        if len(self._scenarios) >= self._max_scenarios:
            msg = f"Maximum {self._max_scenarios} scenarios allowed for comparison"
            raise ScenarioLimitError(msg)

        scenario = Scenario(
            name=name or f"Scenario {len(self._scenarios) + 1}",
            params=params,
            result=self._engine.calculate(params),
        )
        self._scenarios.append(scenario)
        logger.debug("Added scenario %r (total %d)", scenario.name, scenario.result.grand_total)
        return scenario

    def remove(self, index: int) -> Scenario:
        """Remove and return the scenario at ``index``.

        Raises:
            IndexError: If there is no scenario at ``index``.
        """
        self._check_index(index)
        count_before = len(self._scenarios)
        removed = self._scenarios.pop(index)
        if self.active_index >= count_before - 1:
            self.active_index = max(0, count_before - 2)
        return removed

    def select(self, index: int) -> Scenario:
        """Mark the scenario at ``index`` active and return it.

        Raises:
            IndexError: If there is no scenario at ``index``.
        """
        self._check_index(index)
        scenario = self._scenarios[index]
        self.active_index = index
        return scenario

    def _check_index(self, index: int) -> None:
        # Negative indices are not positions from the end here
        if not 0 <= index < len(self._scenarios):
            msg = f"No scenario at index {index}"
            raise IndexError(msg)

    def clear(self) -> None:
        self._scenarios.clear()
        self.active_index = 0

    def insights(self) -> ScenarioInsights | None:
        """Cheapest, most expensive and average totals; None when empty."""
        if not self._scenarios:
            return None

        totals = [s.result.grand_total for s in self._scenarios]
        cheapest = min(self._scenarios, key=lambda s: s.result.grand_total)
        most_expensive = max(self._scenarios, key=lambda s: s.result.grand_total)
        return ScenarioInsights(
            count=len(totals),
            min_cost=min(totals),
            max_cost=max(totals),
            avg_cost=sum(totals) / len(totals),
            savings=max(totals) - min(totals),
            cheapest=cheapest.name,
            most_expensive=most_expensive.name,
        )
