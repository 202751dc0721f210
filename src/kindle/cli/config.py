"""Configuration file loading."""

import logging
from pathlib import Path
from typing import Optional, Union

from ruamel.yaml import YAML
from pydantic import ValidationError

from kindle.models.config import KindleConfig


logger = logging.getLogger(__name__)


def load_config(path: Optional[Union[str, Path]]) -> KindleConfig:
    """Load a YAML configuration file; no file means defaults."""
    if path is None:
        return KindleConfig()

    config_file = Path(path)
    if not config_file.exists():
        logger.warning(f"Config file not found, using defaults: {config_file}")
        return KindleConfig()

    yaml = YAML(typ="safe")
    data = yaml.load(config_file.read_text()) or {}
    try:
        config = KindleConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid config {config_file}: {e}")
        raise
    logger.debug(f"Loaded config: {config_file}")
    return config
