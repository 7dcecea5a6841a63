"""Planner constants — no mutable state."""
from pathlib import Path

# Sentinel for an unused feature slot on an item
EMPTY_FEATURE = 0

# Each item can carry up to this many features (tripods).
MAX_ITEM_FEATURES = 3

# Reports render the feature bitset with at least this many binary digits.
BITSET_WIDTH = 64

RESOURCES_DIR = Path(__file__).parent / "resources"
DEFAULT_CONFIG_PATH = RESOURCES_DIR / "sorceress.json"

# Environment overrides read by the process entry point
CONFIG_ENV_VAR = "TRIPODPLANNER_CONFIG"
LOG_LEVEL_ENV_VAR = "TRIPODPLANNER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
