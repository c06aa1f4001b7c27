"""Custom exception hierarchy for the eventbudget package."""

from __future__ import annotations


class EventBudgetError(Exception):
    """Base exception for all eventbudget errors."""


class InvalidParameterError(EventBudgetError):
    """Raised by strict engines when an event parameter is out of range."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {field}={value!r}: {reason}")
        self.field = field
        self.value = value


class IncompleteParametersError(EventBudgetError):
    """Raised when an operation needs city, event type and venue type set."""


class ScenarioLimitError(EventBudgetError):
    """Raised when a comparison already holds the maximum number of scenarios."""


class UnknownTemplateError(EventBudgetError):
    """Raised when an event template id is not recognised."""
