"""HTTP API for the eventbudget engine."""
