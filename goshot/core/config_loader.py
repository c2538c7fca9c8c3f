"""Configuration loading: defaults overlaid by an optional YAML file."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .models import GoshotConfig

logger = logging.getLogger(__name__)

# Top-level key that holds goshot settings in the YAML document
CONFIG_NAMESPACE = "goshot"


def default_config() -> GoshotConfig:
    return GoshotConfig()


def merge_config(defaults: GoshotConfig, overrides: Optional[Dict[str, Any]]) -> GoshotConfig:
    """Overlay file values on top of the defaults and validate the result.

    Keys that GoshotConfig does not know are dropped. Validation and path
    normalisation happen here so every loaded config passes through one place.
    """
    data = defaults.model_dump()
    for key, value in (overrides or {}).items():
        if key in GoshotConfig.model_fields:
            data[key] = value
        else:
            logger.debug(f"Ignoring unknown config key: {key}")

    try:
        return GoshotConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e


def read_config_file(config_file: str) -> Dict[str, Any]:
    """Read the goshot namespace from a YAML file."""
    path = Path(config_file)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file {config_file}: {e}") from e

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse config file {config_file}: {e}") from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigError(f"config file {config_file} must contain a mapping at the top level")

    section = document.get(CONFIG_NAMESPACE)
    if section is None:
        logger.debug(f"No '{CONFIG_NAMESPACE}' section in {config_file}, using defaults")
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{CONFIG_NAMESPACE}' in {config_file} must be a mapping")

    return section


def load_config(config_file: Optional[str] = None) -> GoshotConfig:
    """Load the run configuration, reading config_file when one is given."""
    defaults = default_config()
    if not config_file:
        logger.debug("No config file given, using defaults")
        return merge_config(defaults, None)

    overrides = read_config_file(config_file)
    config = merge_config(defaults, overrides)
    logger.info(f"Loaded config from {config_file}: path={config.path!r}")
    return config
