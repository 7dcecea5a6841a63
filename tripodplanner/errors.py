"""Exceptions raised by the planner."""


class ConfigurationError(ValueError):
    """Raised when planner input (config file, catalog, capacities) is unusable."""


class StateValidationError(ValueError):
    """Raised when the search state violates a capacity or usage constraint."""
