"""tripodplanner — tripod library storage optimizer."""

from tripodplanner.errors import ConfigurationError, StateValidationError
from tripodplanner.models import (
    Item, PriorityPrune, PlannerConfig,
    Score, Report, SearchResult,
)
from tripodplanner.catalog import load_config, dump_config, resolve_config_path
from tripodplanner.index import CandidateIndex
from tripodplanner.scoring import ScoreModel
from tripodplanner.optimizer import TripodOptimizer
from tripodplanner.reporter import ConsoleReporter, CollectingReporter

__all__ = [
    # Errors
    "ConfigurationError", "StateValidationError",
    # Models
    "Item", "PriorityPrune", "PlannerConfig",
    "Score", "Report", "SearchResult",
    # Config
    "load_config", "dump_config", "resolve_config_path",
    # Search
    "CandidateIndex", "ScoreModel", "TripodOptimizer",
    # Output
    "ConsoleReporter", "CollectingReporter",
]
