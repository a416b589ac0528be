import logging
from typing import Optional

from node_bootstrap.core.config import BootstrapConfig, bootstrap_config
from node_bootstrap.core.loggers import logger_name, make_logger, silence_chatty_opentelemetry_loggers
from node_bootstrap.core.tracing import TRACING_ENABLED, TracingFlag
from node_bootstrap.domain.entities import (
    Configuration,
    ConfigurationOverrides,
    NodeProgram,
    TaskExecutor,
)
from node_bootstrap.domain.gateways import PlatformDirectoryGateway
from node_bootstrap.domain.use_cases.resolve_configuration_use_cases import (
    ResolveNodeConfigurationUseCase,
)
from node_bootstrap.infra.gateways import AppdirsPlatformDirectoryGateway

logger = make_logger(logger_name())

PACKAGE_LOGGER_PREFIX = "node_bootstrap"


def init_node(
    config: Optional[BootstrapConfig] = None,
    flag: TracingFlag = TRACING_ENABLED,
) -> None:
    """Initializes process-wide state for a node. Must be called once, before any threads start.

    1. Sets the tracing flag from the bootstrap config
    2. Applies the configured log level to the package's loggers
    3. Quiets the OpenTelemetry SDK's diagnostic loggers

    Raises TracingFlagAlreadySetException if called a second time.
    """
    config = config or bootstrap_config()
    # the flag can only be written once, so nothing after it may fail on bad input
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {config.log_level!r}")
    flag.set(config.tracing_enabled)

    for name in list(logging.root.manager.loggerDict):
        if name == PACKAGE_LOGGER_PREFIX or name.startswith(PACKAGE_LOGGER_PREFIX + "."):
            logging.getLogger(name).setLevel(level)
    silence_chatty_opentelemetry_loggers()

    logger.info(
        f"Initialized node bootstrap: span_runtime={config.span_runtime} "
        f"tracing_enabled={flag.is_enabled()}"
    )


def create_configuration(
    program: NodeProgram,
    task_executor: TaskExecutor,
    overrides: Optional[ConfigurationOverrides] = None,
    platform_directory_gateway: Optional[PlatformDirectoryGateway] = None,
) -> Configuration:
    """Resolves the node configuration for `program`, see :class:`ResolveNodeConfigurationUseCase`."""
    use_case = ResolveNodeConfigurationUseCase(
        platform_directory_gateway=platform_directory_gateway or AppdirsPlatformDirectoryGateway()
    )
    return use_case.execute(program, task_executor, overrides)
