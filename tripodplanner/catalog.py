"""Planner config loading (JSON file -> PlannerConfig)."""
import logging
import os
import pathlib
from typing import Optional

import orjson
from pydantic import ValidationError

from tripodplanner.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH
from tripodplanner.errors import ConfigurationError
from tripodplanner.models import PlannerConfig

logger = logging.getLogger(__name__)


def resolve_config_path(path: Optional[pathlib.Path] = None) -> pathlib.Path:
    """Explicit path, else $TRIPODPLANNER_CONFIG, else the bundled catalog."""
    if path is not None:
        return pathlib.Path(path)
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return pathlib.Path(env)
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[pathlib.Path] = None) -> PlannerConfig:
    file_path = resolve_config_path(path)
    try:
        raw = orjson.loads(file_path.read_bytes())
    except OSError as e:
        raise ConfigurationError(f"Cannot read config {file_path}: {e}") from e
    except orjson.JSONDecodeError as e:
        raise ConfigurationError(f"Config {file_path} is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config {file_path} must be a JSON object")
    try:
        config = PlannerConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config {file_path}:\n{e}") from e
    logger.info("Loaded %d items in %d categories from %s",
                len(config.items), len(config.capacities), file_path)
    return config


def dump_config(config: PlannerConfig) -> bytes:
    """Serialize a config back to the on-disk JSON layout."""
    data = config.model_dump(mode="json", exclude_none=True)
    for item in data["items"]:
        item.pop("feature_ids", None)
    return orjson.dumps(data, option=orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS)
