"""Input models for the eventbudget engine and planning forms."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_FORM_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    allow_inf_nan=False,
)


class EventParameters(BaseModel):
    """Budget calculator input for a single event.

    Code fields (city, venue type, ...) are plain strings rather than enums:
    an unknown code is priced with a neutral fallback by the engine instead
    of being rejected here. Numeric fields must be finite but are otherwise
    unconstrained; range checks belong to a strict engine or to the caller.

    Accepts both ``venue_type`` and ``venueType`` style keys.
    """

    model_config = _FORM_CONFIG

    city: str | None = None
    venue_type: str | None = None
    catering_type: str | None = None
    audience_size: int = 50
    duration: float = 4.0
    setup_time: float = 2.0
    cleanup_time: float = 1.0
    additional_services: tuple[str, ...] = ()
    event_type: str | None = None

    @property
    def is_complete(self) -> bool:
        """True when city, event type and venue type are all set."""
        return bool(self.city and self.event_type and self.venue_type)


class DashboardData(BaseModel):
    """Event preferences captured on the planning dashboard.

    ``event_type`` holds the dashboard's display label (e.g.
    ``"Corporate Conference"``), which is mapped to a budget event code
    when synchronised with the calculator.
    """

    model_config = _FORM_CONFIG

    event_name: str = ""
    event_type: str = ""
    description: str = ""
    date: str = ""
    time: str = ""
    location: str = ""
    city: str = ""
    venue: str = ""
    venue_type: str = ""
    audience_size: int = 50
    duration: float = 4.0
    budget: int = 0
    selected_functions: tuple[str, ...] = Field(default_factory=tuple)
