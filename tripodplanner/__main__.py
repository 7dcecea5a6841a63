"""Run the optimizer once over the configured catalog.

    python -m tripodplanner

Set TRIPODPLANNER_CONFIG to use another catalog file and
TRIPODPLANNER_LOG_LEVEL (e.g. INFO) for diagnostics on stderr.
"""
import logging
import os
import sys

from tripodplanner.catalog import load_config
from tripodplanner.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR
from tripodplanner.optimizer import TripodOptimizer
from tripodplanner.reporter import ConsoleReporter


def resolve_log_level() -> str:
    """$TRIPODPLANNER_LOG_LEVEL if it names a logging level, else the default."""
    level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def main() -> int:
    level = resolve_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    requested = os.environ.get(LOG_LEVEL_ENV_VAR)
    if requested and requested.strip().upper() != level:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using %s", requested, level)
    config = load_config()
    optimizer = TripodOptimizer.from_config(config)
    optimizer.run(ConsoleReporter(sys.stdout, config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
