from .chain_spec import ChainSpec, TelemetryEndpoints
from .configuration import (
    Configuration,
    DatabaseBackend,
    DatabaseConfig,
    ExecutionStrategies,
    ExecutionStrategy,
    KeystoreConfig,
    KeystoreKind,
    NetworkConfiguration,
    NodeKeyConfig,
    NodeKeyType,
    PoolLimit,
    PrometheusConfig,
    PruningMode,
    Role,
    SocketAddress,
    TaskExecutor,
    TracingReceiver,
    TransactionPoolOptions,
    WasmExecutionMethod,
)
from .node_program import NodeProgram
from .overrides import UNSET, ConfigurationOverrides, DatabaseConfigFactory

__all__ = (
    "ChainSpec",
    "Configuration",
    "ConfigurationOverrides",
    "DatabaseBackend",
    "DatabaseConfig",
    "DatabaseConfigFactory",
    "ExecutionStrategies",
    "ExecutionStrategy",
    "KeystoreConfig",
    "KeystoreKind",
    "NetworkConfiguration",
    "NodeKeyConfig",
    "NodeKeyType",
    "NodeProgram",
    "PoolLimit",
    "PrometheusConfig",
    "PruningMode",
    "Role",
    "SocketAddress",
    "TaskExecutor",
    "TelemetryEndpoints",
    "TracingReceiver",
    "TransactionPoolOptions",
    "UNSET",
    "WasmExecutionMethod",
)
