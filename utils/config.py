"""Configuration loading helpers."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from core.exceptions import ConfigurationError, ConfigurationMissing
from core.models.config import BotConfig

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("discord_token",)


def read_yaml(path: str) -> Dict[str, Any]:
    """Read the optional YAML tuning file."""
    if not os.path.exists(path):
        logger.info(f"No {path} found, using default layout settings")
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(path, message=f"{path} must contain a mapping")
    return data


def load_config(path: str = "config.yml", dotenv: bool = True) -> BotConfig:
    """Load configuration from the environment and the YAML file.

    Raises:
        ConfigurationMissing: a required secret is unset.
        ConfigurationError: any other value is invalid.
    """
    if dotenv:
        load_dotenv()

    data = read_yaml(path)
    try:
        return BotConfig(**data)
    except ValidationError as e:
        for error in e.errors():
            key = str(error["loc"][0]) if error["loc"] else ""
            if key in REQUIRED_KEYS:
                raise ConfigurationMissing(key) from e
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(key, message=f"Invalid configuration for {key}: {first['msg']}") from e
