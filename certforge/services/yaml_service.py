"""YAML configuration loading service."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from certforge.models.config import AppConfig

logger = logging.getLogger("certforge")

DEFAULT_CONFIG_PATH = Path("certforge.yaml")


class YAMLService:
    """Service for YAML file operations."""

    @staticmethod
    def load_yaml(file_path: Path) -> Dict[str, Any]:
        """
        Load YAML file and return as dictionary.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML content as dictionary

        Raises:
            FileNotFoundError: If file doesn't exist
            yaml.YAMLError: If file is not valid YAML
        """
        if not file_path.exists():
            raise FileNotFoundError(f"YAML file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
                logger.debug(f"Loaded YAML from: {file_path}")
                return data or {}
            except yaml.YAMLError as e:
                logger.error(f"Error parsing YAML file {file_path}: {e}")
                raise

    @staticmethod
    def load_config(config_path: Optional[Path] = None) -> AppConfig:
        """
        Load application configuration.

        An explicit path must exist. Without one, ``./certforge.yaml`` is
        used when present and built-in defaults otherwise.

        Args:
            config_path: Explicit configuration file

        Returns:
            Application configuration

        Raises:
            ValueError: If the file is missing, not valid YAML, or fails validation
        """
        if config_path is None:
            if not DEFAULT_CONFIG_PATH.exists():
                return AppConfig()
            config_path = DEFAULT_CONFIG_PATH

        try:
            data = YAMLService.load_yaml(config_path)
        except FileNotFoundError:
            raise ValueError(f"Config file not found: {config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config file {config_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Invalid config file {config_path}: expected a mapping")

        try:
            return AppConfig(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid config file {config_path}: {e}")
