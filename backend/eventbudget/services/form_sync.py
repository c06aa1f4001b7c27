"""Synchronisation between the planning dashboard and the budget form.

The dashboard and the budget calculator keep separate parameter sets that
overlap on a handful of fields. Instead of sharing one mutable object, each
update function takes what changed and returns a new PlanningState in which
only the overlapping fields have been copied across.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from eventbudget.data.city_multipliers import CITY_MULTIPLIERS
from eventbudget.engine import round_half_up
from eventbudget.models.params import DashboardData, EventParameters

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Dashboard display label -> budget event code
EVENT_TYPE_TO_BUDGET: dict[str, str] = {
    "Corporate Conference": "corporate",
    "Wedding Celebration": "wedding",
    "Birthday Party": "birthday",
    "Product Launch": "product-launch",
    "Academic Seminar": "academic",
    "Networking Event": "networking",
    "Charity Fundraiser": "fundraiser",
    "Music Concert": "corporate",
    "Art Exhibition": "corporate",
    "Sports Tournament": "corporate",
}

# Named venue -> venue type
VENUE_TO_TYPE: dict[str, str] = {
    "taj-palace-delhi": "outdoor-venue",
    "leela-mumbai": "hotel-ballroom",
    "itc-maurya-delhi": "conference-center",
    "oberoi-bangalore": "rooftop-venue",
    "trident-hyderabad": "outdoor-venue",
    "lalit-ashok-bangalore": "conference-center",
    "jw-marriott-pune": "hotel-ballroom",
    "radisson-blu-chennai": "banquet-hall",
}

BASE_SUGGESTED_BUDGET = 50_000

_DASHBOARD_TO_BUDGET_FIELDS = ("city", "audience_size", "venue_type", "duration")
_BUDGET_TO_DASHBOARD_FIELDS = ("city", "audience_size", "venue_type", "duration")


class PlanningState(BaseModel):
    """Dashboard and budget-form parameters for one planning session."""

    model_config = ConfigDict(frozen=True)

    dashboard: DashboardData = Field(default_factory=DashboardData)
    budget: EventParameters = Field(default_factory=EventParameters)


def map_event_type_to_budget(label: str | None) -> str:
    """Map a dashboard event label to a budget event code.

    Labels without an explicit mapping are slugified:
    ``"Team Offsite"`` -> ``"team-offsite"``.
    """
    if not label:
        return ""
    mapped = EVENT_TYPE_TO_BUDGET.get(label)
    if mapped:
        return mapped
    return re.sub(r"\s+", "-", label.lower())


def map_venue_to_type(venue: str | None) -> str:
    """Venue type for a named venue, or '' when the venue is not mapped."""
    if not venue:
        return ""
    return VENUE_TO_TYPE.get(venue, "")


def suggested_budget(city: str | None) -> int | None:
    """Starting budget for a city, scaled from a 50,000 baseline.

    Returns None for unset or unknown cities.
    """
    multiplier = CITY_MULTIPLIERS.get(city) if city else None
    if multiplier is None:
        return None
    return round_half_up(BASE_SUGGESTED_BUDGET * multiplier)


def _check_fields(model: type[BaseModel], changes: Mapping[str, Any]) -> None:
    unknown = sorted(set(changes) - set(model.model_fields))
    if unknown:
        msg = f"Unknown {model.__name__} field(s): {', '.join(unknown)}"
        raise ValueError(msg)


def update_dashboard(state: PlanningState, **changes: Any) -> PlanningState:
    """Apply dashboard changes and copy the overlapping ones to the budget form.

    City, audience size, venue type and duration are copied as-is; the event
    type label is mapped to a budget event code.
    """
    _check_fields(DashboardData, changes)
    dashboard = DashboardData.model_validate({**state.dashboard.model_dump(), **changes})

    budget_changes = {f: changes[f] for f in _DASHBOARD_TO_BUDGET_FIELDS if f in changes}
    if "event_type" in changes:
        budget_changes["event_type"] = map_event_type_to_budget(changes["event_type"])

    budget = state.budget
    if budget_changes:
        logger.debug("Syncing dashboard -> budget: %s", sorted(budget_changes))
        budget = EventParameters.model_validate({**budget.model_dump(), **budget_changes})

    return PlanningState(dashboard=dashboard, budget=budget)


def update_budget(state: PlanningState, **changes: Any) -> PlanningState:
    """Apply budget-form changes and copy the overlapping ones to the dashboard.

    Event type is not copied back: the dashboard keeps its display label.
    """
    _check_fields(EventParameters, changes)
    budget = EventParameters.model_validate({**state.budget.model_dump(), **changes})

    dashboard_changes = {
        f: ("" if changes[f] is None else changes[f])
        for f in _BUDGET_TO_DASHBOARD_FIELDS
        if f in changes
    }

    dashboard = state.dashboard
    if dashboard_changes:
        logger.debug("Syncing budget -> dashboard: %s", sorted(dashboard_changes))
        dashboard = DashboardData.model_validate(
            {**dashboard.model_dump(), **dashboard_changes}
        )

    return PlanningState(dashboard=dashboard, budget=budget)


def _first(prefs: Mapping[str, Any], *keys: str) -> Any:
    """First truthy value among ``keys``, accepting snake_case or camelCase."""
    for key in keys:
        value = prefs.get(key)
        if value:
            return value
    return None


def apply_preferences(state: PlanningState, prefs: Mapping[str, Any]) -> PlanningState:
    """Load saved preferences into both the dashboard and the budget form.

    Missing or empty preference values keep the current field value.
    """
    event_type = _first(prefs, "event_type", "eventType")
    city = _first(prefs, "city")
    venue = _first(prefs, "venue")
    audience_size = _first(prefs, "number_of_people", "numberOfPeople")

    dashboard = state.dashboard
    dashboard_updates = {
        "event_type": event_type or dashboard.event_type,
        "city": city or dashboard.city,
        "venue": venue or dashboard.venue,
        "audience_size": audience_size or dashboard.audience_size,
        "budget": _first(prefs, "budget") or dashboard.budget,
        "date": _first(prefs, "event_date", "eventDate") or dashboard.date,
        "time": _first(prefs, "event_time", "eventTime") or dashboard.time,
        "selected_functions": (
            _first(prefs, "selected_functions", "selectedFunctions")
            or dashboard.selected_functions
        ),
    }

    budget = state.budget
    budget_updates = {
        "city": city or budget.city,
        "audience_size": audience_size or budget.audience_size,
        "event_type": map_event_type_to_budget(event_type) or budget.event_type,
        "venue_type": map_venue_to_type(venue) or budget.venue_type,
    }

    logger.debug("Loaded preferences for city=%r event_type=%r", city, event_type)
    return PlanningState(
        dashboard=DashboardData.model_validate({**dashboard.model_dump(), **dashboard_updates}),
        budget=EventParameters.model_validate({**budget.model_dump(), **budget_updates}),
    )


def to_preferences(state: PlanningState) -> dict[str, Any]:
    """Preferences payload for the preferences store, in its camelCase keys."""
    dashboard, budget = state.dashboard, state.budget
    return {
        "eventType": dashboard.event_type,
        "city": dashboard.city or budget.city or "",
        "venue": dashboard.venue,
        "numberOfPeople": dashboard.audience_size or budget.audience_size,
        "budget": dashboard.budget,
        "eventDate": dashboard.date,
        "eventTime": dashboard.time,
        "selectedFunctions": list(dashboard.selected_functions),
    }
