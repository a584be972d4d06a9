"""
Configuration validation utilities.

Type checking is delegated to the OmegaConf structured schema; this module adds
the value checks a schema cannot express and the environment variable merge.
"""
import logging
import os
from typing import Any, Optional

from omegaconf import DictConfig, ListConfig, OmegaConf

from ..types.types import ConfigurationError

CONFIG_FILE_ENV = "AGREEMENT_EVAL_CONFIG_FILE"
ENV_PREFIX = "AGREEMENT_EVAL"

OUTPUT_FORMATS = ("table", "json")


def _parse_env_value(env_value: str, current: Any) -> Any:
    """Interpret an environment string using the type of the value it replaces."""
    if isinstance(current, (list, ListConfig)):
        return [part.strip() for part in env_value.split(",") if part.strip()]
    if env_value.lower() in ("true", "false"):
        return env_value.lower() == "true"
    try:
        return int(env_value)
    except ValueError:
        try:
            return float(env_value)
        except ValueError:
            return env_value


def merge_with_env_vars(config: DictConfig, prefix: str = ENV_PREFIX) -> DictConfig:
    """
    Merge configuration with environment variables.

    Environment variables override config values using the format:
    {PREFIX}_{PATH}={VALUE}, with ``__`` separating nested keys.

    Example:
        AGREEMENT_EVAL_OUTPUT__PRECISION=6

    Args:
        config: Base configuration (structured, writable)
        prefix: Environment variable prefix

    Returns:
        Updated configuration
    """
    env_vars = {
        k: v for k, v in os.environ.items() if k.startswith(f"{prefix}_") and k != CONFIG_FILE_ENV
    }

    for env_key, env_value in sorted(env_vars.items()):
        config_path = env_key[len(prefix) + 1 :].lower().replace("__", ".")
        current = OmegaConf.select(config, config_path, default=None)
        try:
            OmegaConf.update(config, config_path, _parse_env_value(env_value, current), merge=False)
        except Exception as e:
            raise ConfigurationError(
                f"Invalid environment override {env_key}={env_value!r}: {e!s}",
                context={"variable": env_key},
                cause=e,
            )

    return config


def validate_config(config: DictConfig, metric_names: Optional[list] = None) -> None:
    """
    Check configuration values that the schema types cannot express.

    Args:
        config: Merged configuration
        metric_names: Known metric names; unknown enabled metrics are rejected

    Raises:
        ConfigurationError: If a value is out of range or unknown
    """
    if config.output.precision < 0:
        raise ConfigurationError(
            f"output.precision must be non-negative, got {config.output.precision}"
        )

    if config.output.format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {config.output.format!r}"
        )

    level = str(config.logging.level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown logging level: {config.logging.level!r}")

    if metric_names is not None:
        unknown = [name for name in config.metrics.enabled if name not in metric_names]
        if unknown:
            raise ConfigurationError(
                f"Unknown metrics: {', '.join(unknown)}",
                context={"known": list(metric_names)},
            )
        if not config.metrics.enabled:
            raise ConfigurationError("At least one metric must be enabled")
