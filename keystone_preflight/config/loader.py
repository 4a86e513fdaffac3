"""
Configuration loader.

Builds a PreflightConfig from, lowest to highest precedence: defaults,
an optional YAML file, environment variables (optionally layered over a
dotenv file), and explicit overrides such as CLI flags.
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from dotenv import dotenv_values
from pydantic import ValidationError

from ..exceptions import ConfigError
from ..logging_config import get_logger
from .defaults import ENV_FIELD_MAP
from .models import PreflightConfig

logger = get_logger(__name__)


class ConfigLoader:
    """
    Loads and validates preflight configuration.

    Example:
        config = ConfigLoader(config_file="preflight.yaml").load(
            overrides={"environment": "prod"}
        )
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        env_file: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the config loader.

        Args:
            config_file: Optional YAML file with config values
            env_file: Optional dotenv file; process environment wins over it
            environ: Environment mapping (default: os.environ)
        """
        self.config_file = Path(config_file) if config_file else None
        self.env_file = Path(env_file) if env_file else None
        self.environ = os.environ if environ is None else environ

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> PreflightConfig:
        """
        Load configuration from all sources.

        Args:
            overrides: Values that take precedence over everything else;
                None values are ignored

        Returns:
            Frozen PreflightConfig

        Raises:
            ConfigError: If a source cannot be read or a value is invalid
        """
        data: Dict[str, Any] = {}

        if self.config_file:
            data.update(self._read_yaml(self.config_file))

        data.update(self._read_environment())

        if overrides:
            data.update({k: v for k, v in overrides.items() if v is not None})

        return self._parse(data)

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML config file."""
        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {file_path} must contain a mapping",
                details=f"Found {type(data).__name__}",
            )

        logger.debug("Loaded %d setting(s) from %s", len(data), file_path)
        return data

    def _read_environment(self) -> Dict[str, Any]:
        """Collect config values from the dotenv file and environment."""
        env: Dict[str, Optional[str]] = {}

        if self.env_file:
            if not self.env_file.exists():
                raise ConfigError(
                    f"Env file not found: {self.env_file}",
                    remediation="Pass an existing file to --env-file",
                )
            env.update(dotenv_values(self.env_file))
            logger.debug("Loaded env file %s", self.env_file)

        env.update(self.environ)

        data = {}
        for var, field_name in ENV_FIELD_MAP.items():
            value = env.get(var)
            # Unset and empty variables fall back to lower-precedence sources
            if value is None or value == "":
                continue
            data[field_name] = value
        return data

    def _parse(self, data: Dict[str, Any]) -> PreflightConfig:
        """Validate the merged values."""
        try:
            return PreflightConfig(**data)
        except ValidationError as e:
            errors = e.errors()
            key = ".".join(str(p) for p in errors[0]["loc"]) if errors and errors[0]["loc"] else None
            raise ConfigError(
                "Invalid preflight configuration",
                config_key=key,
                details=str(e),
            )


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    env_file: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> PreflightConfig:
    """Shortcut for ConfigLoader(...).load(overrides)."""
    return ConfigLoader(config_file, env_file, environ).load(overrides)
