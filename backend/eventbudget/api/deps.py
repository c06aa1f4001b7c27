"""Environment-driven wiring for the FastAPI application."""

from __future__ import annotations

import logging
import os

from eventbudget.engine import BudgetEngine
from eventbudget.factory import create_default_engine

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def get_cors_origins() -> list[str]:
    """Allowed CORS origins from EVENTBUDGET_CORS_ORIGINS (comma separated)."""
    raw = os.environ.get("EVENTBUDGET_CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


def create_engine() -> BudgetEngine:
    """Create a BudgetEngine with default pricing.

    Set EVENTBUDGET_STRICT_VALIDATION=1 to reject out-of-range guest counts
    and durations with a 400 instead of pricing them as given.
    """
    strict = _env_flag("EVENTBUDGET_STRICT_VALIDATION")
    engine = create_default_engine(strict=strict)
    logger.info(
        "Budget engine ready (pricing %s, strict=%s)", engine.pricing_version, strict
    )
    return engine
