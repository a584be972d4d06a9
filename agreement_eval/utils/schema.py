"""
Configuration schemas for validation.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..metrics.registry import METRIC_NAMES


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    format: str = "%(levelname)s - %(name)s - %(message)s"
    file: Optional[str] = None
    json_format: bool = False


@dataclass
class OutputConfig:
    precision: int = 4
    placeholder: str = "-"
    format: str = "table"
    show_datasets: bool = False
    show_max_kendall: bool = True


@dataclass
class MetricsConfig:
    enabled: List[str] = field(default_factory=lambda: list(METRIC_NAMES))


@dataclass
class AgreementConfig:
    name: str = "agreement-eval"
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    metrics: MetricsConfig = field(default_factory=MetricsConfig)
