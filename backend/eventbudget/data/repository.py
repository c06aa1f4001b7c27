"""Pricing repository for looking up rates with neutral fallbacks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from eventbudget.data.city_multipliers import DEFAULT_CITY_MULTIPLIER
from eventbudget.data.rates import (
    DEFAULT_CATERING_COST,
    DEFAULT_SERVICE_COST,
    DEFAULT_VENUE_COST,
)

if TYPE_CHECKING:
    from eventbudget.data.pricing import PricingTables

logger = logging.getLogger(__name__)


class PricingRepository:
    """Repository for looking up pricing data.

    Wraps a PricingTables instance. Every lookup falls back to a neutral
    value for unknown or unset codes instead of raising, so a half-filled
    form still prices cleanly:

    - city -> multiplier 1.0
    - venue type -> base cost 1000
    - catering type -> 0 per guest
    - service code -> 0
    """

    def __init__(self, tables: PricingTables) -> None:
        self._tables = tables
        self._city_multipliers = dict(tables.city_multipliers)
        self._venue_costs = dict(tables.venue_costs)
        self._catering_costs = dict(tables.catering_costs)
        self._service_costs = dict(tables.service_costs)

    @property
    def version(self) -> str:
        return self._tables.version

    @property
    def tables(self) -> PricingTables:
        return self._tables

    def get_city_multiplier(self, city: str | None) -> float:
        multiplier = self._city_multipliers.get(city) if city else None
        if multiplier is None:
            logger.debug("No multiplier for city %r; using %s", city, DEFAULT_CITY_MULTIPLIER)
            return DEFAULT_CITY_MULTIPLIER
        return multiplier

    def get_venue_cost(self, venue_type: str | None) -> float:
        cost = self._venue_costs.get(venue_type) if venue_type else None
        if cost is None:
            logger.debug("No base cost for venue %r; using %s", venue_type, DEFAULT_VENUE_COST)
            return DEFAULT_VENUE_COST
        return cost

    def get_catering_cost(self, catering_type: str | None) -> float:
        """Per-guest catering cost."""
        cost = self._catering_costs.get(catering_type) if catering_type else None
        if cost is None:
            return DEFAULT_CATERING_COST
        return cost

    def get_service_cost(self, service_code: str) -> float:
        cost = self._service_costs.get(service_code)
        if cost is None:
            logger.debug("Unknown service %r; pricing at %s", service_code, DEFAULT_SERVICE_COST)
            return DEFAULT_SERVICE_COST
        return cost
