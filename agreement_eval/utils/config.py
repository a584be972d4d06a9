"""
Configuration management utilities for agreement-eval.
"""
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union, cast

from omegaconf import DictConfig, OmegaConf

from ..metrics.registry import METRIC_NAMES
from ..types.types import ConfigurationError
from .schema import AgreementConfig
from .validation import CONFIG_FILE_ENV, merge_with_env_vars, validate_config


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> DictConfig:
    """
    Build the effective configuration.

    Sources are merged in increasing priority: schema defaults, the YAML file
    (``config_file`` or the ``AGREEMENT_EVAL_CONFIG_FILE`` variable),
    ``AGREEMENT_EVAL_*`` environment variables, then ``overrides`` given as
    dot-notation keys.

    Args:
        config_file: Optional YAML configuration file
        overrides: Mapping of dot-notation keys to values, ``None`` values skipped

    Returns:
        Read-only configuration

    Raises:
        ConfigurationError: If a source is missing, malformed or invalid
    """
    try:
        config = OmegaConf.structured(AgreementConfig)

        if config_file is None:
            config_file = os.environ.get(CONFIG_FILE_ENV) or None

        if config_file is not None:
            config_path = Path(config_file)
            if not config_path.exists():
                raise ConfigurationError(
                    f"Config file not found: {config_path}", context={"path": str(config_path)}
                )
            config = cast(DictConfig, OmegaConf.merge(config, OmegaConf.load(config_path)))

        config = merge_with_env_vars(config)

        for key, value in (overrides or {}).items():
            if value is not None:
                OmegaConf.update(config, key, value, merge=False)

        validate_config(config, METRIC_NAMES)

        OmegaConf.set_readonly(config, True)
        return config

    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e!s}", cause=e)
