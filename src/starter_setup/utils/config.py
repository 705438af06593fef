"""
Setup Configuration

Optional configuration for the setup wizard, read from ``setup/config.yml``
inside the template project. Features:
- Single-file YAML loading with environment variable resolution
- Validated, immutable settings model with defaults matching the template

A template without a configuration file runs with the defaults.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Use standard logging (not get_logger) to avoid circular imports with logger.py
logger = logging.getLogger("CONFIG")

# The setup tooling directory; it holds the config file and is deleted after a run
SETUP_DIR = "setup"
CONFIG_FILENAME = "config.yml"

DEFAULT_FEATURE_SELECTION = (
    "gitHooks",
    "githubTemplates",
    "githubCI",
    "markdownlint",
    "codeOfConduct",
)


class SetupConfigError(Exception):
    """Raised when the setup configuration file cannot be used."""


class FeatureEntry(BaseModel):
    """Extra registry entry declared under ``features:``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(min_length=1)
    label: str
    hint: str | None = None
    files: list[str] = Field(min_length=1)
    dev_dependencies: list[str] = Field(default_factory=list)
    scripts: list[str] | None = None


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value


class SetupConfig(BaseModel):
    """Settings for one setup run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    runtime: str = "bun"
    install_command: list[str] = Field(default_factory=lambda: ["bun", "install"], min_length=1)
    default_entrypoint: str = "src/index.ts"
    default_version: str = "0.1.0"
    default_features: list[str] = Field(default_factory=lambda: list(DEFAULT_FEATURE_SELECTION))
    setup_only_dependencies: list[str] = Field(default_factory=lambda: ["@clack/prompts"])
    template_marker_key: str = "bun-create"
    shipped_license: str = "Apache-2.0"
    json_indent: str | int = "\t"
    features: list[FeatureEntry] = Field(default_factory=list)
    log: LoggingSettings = Field(default_factory=LoggingSettings, alias="logging")


def _resolve_env_vars(data: Any) -> Any:
    """Recursively resolve environment variables in configuration data.

    Supports ``${VAR_NAME}``, ``${VAR_NAME:-default}`` and ``$VAR_NAME``.
    Unset variables without a default are left untouched.
    """
    if isinstance(data, dict):
        return {key: _resolve_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars(item) for item in data]
    elif isinstance(data, str):

        def replace_env_var(match):
            if match.group(1):
                var_name = match.group(1)
                default_value = match.group(2)
            else:
                var_name = match.group(3)
                default_value = None

            env_value = os.environ.get(var_name)
            if env_value is None:
                if default_value is not None:
                    return default_value
                logger.debug(f"Environment variable '{var_name}' not found, keeping original value")
                return match.group(0)
            return env_value

        pattern = r"\$\{([^}:]+)(?::-(.*?))?\}|\$([A-Za-z_][A-Za-z0-9_]*)"
        return re.sub(pattern, replace_env_var, data)
    else:
        return data


def _load_yaml_file(file_path: Path) -> dict[str, Any]:
    try:
        with open(file_path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SetupConfigError(f"Error parsing YAML configuration {file_path}: {e}") from e

    if config is None:
        logger.warning(f"Configuration file is empty: {file_path}")
        return {}

    if not isinstance(config, dict):
        raise SetupConfigError(f"Configuration file must contain a mapping: {file_path}")

    return config


def find_config_file(project_dir: Path) -> Path | None:
    """Find ``config.yml`` in the project's setup directory.

    Returns:
        Path to the configuration file or None if not found
    """
    config_path = project_dir / SETUP_DIR / CONFIG_FILENAME
    return config_path if config_path.is_file() else None


def load_setup_config(project_dir: Path, config_path: Path | None = None) -> SetupConfig:
    """Load the setup configuration for a project.

    Args:
        project_dir: Template project root
        config_path: Explicit configuration file (defaults to ``setup/config.yml``)

    Returns:
        Validated SetupConfig; defaults when no file exists

    Raises:
        SetupConfigError: If the file is not valid YAML or fails validation
    """
    if config_path is None:
        config_path = find_config_file(project_dir)

    if config_path is None:
        logger.debug(f"No setup configuration in {project_dir}, using defaults")
        return SetupConfig()

    raw = _resolve_env_vars(_load_yaml_file(config_path))

    try:
        config = SetupConfig.model_validate(raw)
    except ValidationError as e:
        raise SetupConfigError(f"Invalid setup configuration {config_path}:\n{e}") from e

    logger.debug(f"Loaded setup configuration from {config_path}")
    return config
