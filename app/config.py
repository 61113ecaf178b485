"""
Configuration loader
"""
import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from app.models import Settings


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/server.yaml"
CONFIG_ENV_VAR = "CATALOG_CONFIG"


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load server settings from YAML file

    Path resolution: explicit argument, then the CATALOG_CONFIG environment
    variable, then config/server.yaml. A requested file that does not exist
    is an error; a missing default file means built-in defaults.

    Args:
        config_path: Path to config file

    Returns:
        Settings object

    Raises:
        FileNotFoundError: If a requested config file is not found
        ValueError: If the YAML document is not a mapping or fails validation
    """
    requested = config_path or os.environ.get(CONFIG_ENV_VAR)
    path = Path(requested or DEFAULT_CONFIG_PATH)

    if not path.exists():
        if requested:
            raise FileNotFoundError(f"Config file not found: {path}")
        logger.info(f"No config file at {path}, using defaults")
        return Settings()

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    # Drop keys the server does not know about
    allowed_fields = set(Settings.model_fields)
    unknown = sorted(k for k in data if k not in allowed_fields)
    if unknown:
        logger.warning(f"Ignoring unknown config keys in {path}: {', '.join(unknown)}")
    filtered_data = {k: v for k, v in data.items() if k in allowed_fields}

    return Settings(**filtered_data)
