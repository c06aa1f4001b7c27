"""Schema and default instance of the versioned pricing tables."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from eventbudget.data.city_multipliers import CITY_MULTIPLIERS
from eventbudget.data.rates import CATERING_COSTS, SERVICE_COSTS, VENUE_COSTS

PRICING_VERSION = "2024.1"


class PricingTables(BaseModel):
    """Static price lookups owned by the engine.

    Changing prices means shipping a new version of these tables; nothing
    edits them at runtime.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    city_multipliers: dict[str, float]
    venue_costs: dict[str, float]
    catering_costs: dict[str, float]
    service_costs: dict[str, float]


DEFAULT_PRICING = PricingTables(
    version=PRICING_VERSION,
    city_multipliers={k.value: v for k, v in CITY_MULTIPLIERS.items()},
    venue_costs={k.value: v for k, v in VENUE_COSTS.items()},
    catering_costs={k.value: v for k, v in CATERING_COSTS.items()},
    service_costs={k.value: v for k, v in SERVICE_COSTS.items()},
)
