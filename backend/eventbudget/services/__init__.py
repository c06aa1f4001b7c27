"""Services built on top of the budget engine."""
