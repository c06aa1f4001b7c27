"""Pricing data layer for the eventbudget engine."""

from eventbudget.data.pricing import DEFAULT_PRICING, PRICING_VERSION, PricingTables
from eventbudget.data.repository import PricingRepository
from eventbudget.data.templates import EVENT_TEMPLATES, EventTemplate

__all__ = [
    "DEFAULT_PRICING",
    "EVENT_TEMPLATES",
    "PRICING_VERSION",
    "EventTemplate",
    "PricingRepository",
    "PricingTables",
]
