"""Core budget calculation engine for the eventbudget library.

The BudgetEngine turns a set of event parameters into a four-category
budget:

1. **Completeness gate**: If city, event type or venue type is unset, return
   an all-zero budget so a half-filled form never errors.
2. **City multiplier**: Look up the regional multiplier (neutral 1.0 for
   unknown cities) and apply it to every base rate.
3. **Venue**: Rental scaled by duration in 4-hour blocks, plus setup and
   cleanup labour by the hour.
4. **Catering**: Per-guest food cost, an 18% service fee, and 8% tax on
   food plus fee.
5. **Services**: One line per selected add-on, in selection order.
6. **Miscellaneous**: 10% contingency over the other three categories,
   flat insurance, and permits for outdoor events.

Every line item is rounded on its own; category totals are sums of rounded
items and the grand total is the sum of category totals.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from eventbudget.exceptions import InvalidParameterError
from eventbudget.formatting import format_hours
from eventbudget.models.budget import BudgetResult, CategoryBreakdown, LineItem

if TYPE_CHECKING:
    from eventbudget.data.pricing import PricingTables
    from eventbudget.data.repository import PricingRepository
    from eventbudget.models.params import EventParameters

logger = logging.getLogger(__name__)

# Venue rates are quoted per block of this many hours
_VENUE_BLOCK_HOURS = 4
_SETUP_RATE_PER_HOUR = 100
_CLEANUP_RATE_PER_HOUR = 80

_CATERING_SERVICE_FEE = 0.18
_CATERING_TAX = 0.08

_CONTINGENCY_RATE = 0.10
_INSURANCE_BASE = 150
_PERMITS_BASE = 200

# Matched against event_type, not venue_type
_PERMIT_EVENT_TYPE = "outdoor-venue"

_NUMERIC_FIELDS = ("audience_size", "duration", "setup_time", "cleanup_time")

ENGINE_VERSION = "0.1.0"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going toward +infinity.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
    budgets must agree with the browser calculator, where 2.5 becomes 3 and
    -2.5 becomes -2.
    """
    return math.floor(value + 0.5)


class BudgetEngine:
    """Deterministic engine that converts EventParameters into a BudgetResult.

    Args:
        repository: Pricing repository providing rate lookups with neutral
            fallbacks.
        strict: When True, reject out-of-range guest counts, durations and
            setup/cleanup times with InvalidParameterError before any
            computation. The default accepts them and produces whatever
            the formulas give.

    Example::

        from eventbudget.data import DEFAULT_PRICING, PricingRepository

        engine = BudgetEngine(PricingRepository(DEFAULT_PRICING))
        budget = engine.calculate(params)
    """

    def __init__(self, repository: PricingRepository, *, strict: bool = False) -> None:
        self._repository = repository
        self._strict = strict

    @property
    def pricing(self) -> PricingTables:
        return self._repository.tables

    @property
    def pricing_version(self) -> str:
        return self._repository.version

    @property
    def strict(self) -> bool:
        return self._strict

    def calculate(self, params: EventParameters) -> BudgetResult:
        """Produce the budget breakdown for one event.

        Returns:
            A BudgetResult whose category totals are exact sums of their
            items. All-zero with empty categories when the form is
            incomplete.

        Raises:
            InvalidParameterError: Before any pricing, for a non-finite
                number, and in strict mode for an out-of-range one.
        """
        self._check_finite(params)
        if self._strict:
            self._validate(params)

        if not params.is_complete:
            logger.debug(
                "Incomplete parameters (city=%r, event_type=%r, venue_type=%r); "
                "returning empty budget",
                params.city,
                params.event_type,
                params.venue_type,
            )
            return BudgetResult.empty()

        multiplier = self._repository.get_city_multiplier(params.city)

        venue = self._venue_breakdown(params, multiplier)
        catering = self._catering_breakdown(params, multiplier)
        services = self._services_breakdown(params, multiplier)
        miscellaneous = self._miscellaneous_breakdown(
            params,
            multiplier,
            subtotal=venue.total + catering.total + services.total,
        )

        return BudgetResult.from_categories(
            venue=venue,
            catering=catering,
            services=services,
            miscellaneous=miscellaneous,
        )

    def _venue_breakdown(
        self, params: EventParameters, multiplier: float
    ) -> CategoryBreakdown:
        base_cost = self._repository.get_venue_cost(params.venue_type)
        venue_cost = round_half_up(
            base_cost * multiplier * (params.duration / _VENUE_BLOCK_HOURS)
        )
        setup_cost = round_half_up(params.setup_time * _SETUP_RATE_PER_HOUR * multiplier)
        cleanup_cost = round_half_up(
            params.cleanup_time * _CLEANUP_RATE_PER_HOUR * multiplier
        )

        return CategoryBreakdown.from_items([
            LineItem(
                name="Venue Rental",
                cost=venue_cost,
                description=f"{format_hours(params.duration)} hours rental",
            ),
            LineItem(
                name="Setup Time",
                cost=setup_cost,
                description=f"{format_hours(params.setup_time)} hours",
            ),
            LineItem(
                name="Cleanup Time",
                cost=cleanup_cost,
                description=f"{format_hours(params.cleanup_time)} hours",
            ),
        ])

    def _catering_breakdown(
        self, params: EventParameters, multiplier: float
    ) -> CategoryBreakdown:
        per_person = self._repository.get_catering_cost(params.catering_type)
        food_cost = round_half_up(per_person * params.audience_size * multiplier)

        if food_cost == 0:
            return CategoryBreakdown.from_items([
                LineItem(
                    name="No Catering Selected",
                    cost=0,
                    description="External or no catering",
                ),
            ])

        service_fee = round_half_up(food_cost * _CATERING_SERVICE_FEE)
        tax = round_half_up((food_cost + service_fee) * _CATERING_TAX)

        return CategoryBreakdown.from_items([
            LineItem(
                name="Food & Beverage",
                cost=food_cost,
                description=f"{params.audience_size} guests",
            ),
            LineItem(
                name="Service Fee (18%)",
                cost=service_fee,
                description="Gratuity and service",
            ),
            LineItem(name="Tax (8%)", cost=tax, description="Local sales tax"),
        ])

    def _services_breakdown(
        self, params: EventParameters, multiplier: float
    ) -> CategoryBreakdown:
        return CategoryBreakdown.from_items(
            LineItem(
                name=service_display_name(code),
                cost=round_half_up(self._repository.get_service_cost(code) * multiplier),
                description="Professional service",
            )
            for code in params.additional_services
        )

    def _miscellaneous_breakdown(
        self, params: EventParameters, multiplier: float, subtotal: int
    ) -> CategoryBreakdown:
        items = [
            LineItem(
                name="Contingency (10%)",
                cost=round_half_up(_CONTINGENCY_RATE * subtotal),
                description="Unexpected expenses buffer",
            ),
            LineItem(
                name="Event Insurance",
                cost=round_half_up(_INSURANCE_BASE * multiplier),
                description="Liability coverage",
            ),
        ]
        if params.event_type == _PERMIT_EVENT_TYPE:
            items.append(
                LineItem(
                    name="Permits & Licenses",
                    cost=round_half_up(_PERMITS_BASE * multiplier),
                    description="Required permits",
                )
            )
        return CategoryBreakdown.from_items(items)

    @staticmethod
    def _check_finite(params: EventParameters) -> None:
        # Models reject inf/nan, but model_construct and model_copy skip validation
        for field in _NUMERIC_FIELDS:
            value = getattr(params, field)
            if not math.isfinite(value):
                raise InvalidParameterError(field, value, "must be a finite number")

    @staticmethod
    def _validate(params: EventParameters) -> None:
        if params.audience_size < 1:
            raise InvalidParameterError(
                "audience_size", params.audience_size, "must be at least 1"
            )
        if params.duration <= 0:
            raise InvalidParameterError("duration", params.duration, "must be positive")
        if params.setup_time < 0:
            raise InvalidParameterError(
                "setup_time", params.setup_time, "must not be negative"
            )
        if params.cleanup_time < 0:
            raise InvalidParameterError(
                "cleanup_time", params.cleanup_time, "must not be negative"
            )


def service_display_name(code: str) -> str:
    """Title-case a hyphenated service code: ``av-equipment`` -> ``Av Equipment``.

    Only the first letter of each word is changed.
    """
    return " ".join(word[:1].upper() + word[1:] for word in code.split("-"))
