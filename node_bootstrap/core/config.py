"""Bootstrap configuration for node_bootstrap.

The configuration file is loaded from the NODE_BOOTSTRAP_CONFIG_PATH environment variable.
If this is not set, the default configuration file is used from
node_bootstrap/core/configs/default.yaml.
"""

import inspect
import logging
import os
from contextlib import contextmanager
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import yaml
from node_bootstrap.core.loggers import logger_name, make_logger

logger = make_logger(logger_name())

__all__: Sequence[str] = (
    "DEFAULT_CONFIG_PATH",
    "CONFIG_PATH",
    "HOST_SPAN_RUNTIME",
    "RESTRICTED_SPAN_RUNTIME",
    "BootstrapConfig",
    "bootstrap_config",
    "config_context",
    "use_config_context",
)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "configs" / "default.yaml"
CONFIG_PATH: str = os.getenv("NODE_BOOTSTRAP_CONFIG_PATH", str(DEFAULT_CONFIG_PATH))

HOST_SPAN_RUNTIME = "host"
RESTRICTED_SPAN_RUNTIME = "restricted"


@dataclass
class BootstrapConfig:
    # "host" records real spans, "restricted" turns every span operation into a no-op
    span_runtime: str = HOST_SPAN_RUNTIME
    tracing_enabled: bool = False
    tracing_service_name: str = "node-bootstrap"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.span_runtime not in (HOST_SPAN_RUNTIME, RESTRICTED_SPAN_RUNTIME):
            raise ValueError(
                f"span_runtime must be one of {HOST_SPAN_RUNTIME!r} or "
                f"{RESTRICTED_SPAN_RUNTIME!r}, got {self.span_runtime!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"log_level must be a standard logging level, got {self.log_level!r}")

    @classmethod
    def from_json(cls, json):
        return cls(**{k: v for k, v in json.items() if k in inspect.signature(cls).parameters})

    @classmethod
    def from_yaml(cls, yaml_path) -> "BootstrapConfig":
        with open(yaml_path, "r") as f:
            raw_data = yaml.safe_load(f)
        return BootstrapConfig.from_json(raw_data or {})


def read_default_config():
    logger.info(f"Using config file path: `{CONFIG_PATH}`")
    return BootstrapConfig.from_yaml(CONFIG_PATH)


_bootstrap_config: Optional[BootstrapConfig] = None


def bootstrap_config() -> BootstrapConfig:
    global _bootstrap_config
    if _bootstrap_config is None:
        _bootstrap_config = read_default_config()
    return _bootstrap_config


@contextmanager
def config_context(config_path: str):
    """Context manager that temporarily changes the config file path."""
    global _bootstrap_config
    current_config = deepcopy(_bootstrap_config)
    try:
        _bootstrap_config = BootstrapConfig.from_yaml(config_path)
        yield
    finally:
        _bootstrap_config = current_config


def use_config_context(config_path: str):
    """Use the config file at the given path."""
    global _bootstrap_config
    _bootstrap_config = BootstrapConfig.from_yaml(config_path)
