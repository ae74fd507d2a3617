"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.addressbook.runtime.config.config_data import ConfigData


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    def replacer(match):
        var_expr = match.group(1)

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        # Handle error messages: ${VAR:?message}
        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        # Handle required variables: ${VAR}
        else:
            var_name = var_expr
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name} not set")
            return value

    pattern = r'\$\{([^}]+)\}'
    return re.sub(pattern, replacer, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Expose ``<ENV>_``-prefixed variables under their unprefixed names.

    With ``APP_ENVIRONMENT=test``, ``TEST_ADDRESSBOOK_DATA_FILE`` is copied to
    ``ADDRESSBOOK_DATA_FILE`` before placeholders are substituted.
    """
    prefix = f"{env_mode.upper()}_"
    env_variables = [(var, value) for var, value in os.environ.items() if var.startswith(prefix)]
    logger.debug(f"Applying environment-specific overrides: {[var for var, _ in env_variables]}")

    for var_name, var_value in env_variables:
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        logger.debug(f"Set environment variable {new_var_name} from {var_name}")


def strip_comment_lines(text: str) -> str:
    """Drop full-line YAML comments so placeholders in them are not substituted."""
    return "\n".join(line for line in text.splitlines() if not line.lstrip().startswith("#"))


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed YAML with environment variables substituted

    Raises:
        ValueError: If required environment variables are missing or the
            file does not describe a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path, encoding="utf-8") as f:
        content = strip_comment_lines(f.read())

    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info(f"Loading configuration for environment: {env_mode}")
    apply_environment_overrides(env_mode)

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        # Extract the 'config' section from the YAML structure
        config_data = loaded.get('config', {})
        config = ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    return config


def load_config(file_path: Path) -> ConfigData:
    """Load ``file_path`` if it exists, otherwise fall back to the defaults."""
    if not Path(file_path).exists():
        logger.info(f"Config file {file_path} not found; using default configuration")
        return ConfigData()
    return load_templated_yaml(Path(file_path))
