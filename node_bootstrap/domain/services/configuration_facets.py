"""Per-facet resolution for node configurations.

Each function takes the caller's overrides plus whatever already-resolved facets it depends on,
and returns the override when one was supplied, otherwise the documented default. Only
:func:`resolve_chain_spec` and :func:`resolve_database_config` can fail; the default database
step rejects a non-positive cache size.
"""

from pathlib import Path
from typing import Any, Optional, Tuple

from node_bootstrap.common.constants import (
    DEFAULT_DATABASE_CACHE_SIZE,
    DEFAULT_MAX_RUNTIME_INSTANCES,
    DEFAULT_STATE_CACHE_SIZE,
)
from node_bootstrap.common.node_name import generate_node_name
from node_bootstrap.core.domain_exceptions import ConfigurationResolutionException
from node_bootstrap.domain.entities import (
    UNSET,
    ChainSpec,
    ConfigurationOverrides,
    DatabaseBackend,
    DatabaseConfig,
    ExecutionStrategies,
    KeystoreConfig,
    NetworkConfiguration,
    NodeKeyConfig,
    NodeProgram,
    PruningMode,
    Role,
    TelemetryEndpoints,
    TracingReceiver,
    TransactionPoolOptions,
    WasmExecutionMethod,
)


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


def resolve_chain_spec(overrides: ConfigurationOverrides, program: NodeProgram) -> ChainSpec:
    if overrides.chain_spec is not None:
        return overrides.chain_spec
    chain_id = overrides.chain_id or ""
    try:
        return program.load_spec(chain_id)
    except Exception as e:
        raise ConfigurationResolutionException(
            f"Failed to load chain specification {chain_id!r}: {e}"
        ) from e


def resolve_database_cache_size(overrides: ConfigurationOverrides) -> int:
    return _or_default(overrides.database_cache_size, DEFAULT_DATABASE_CACHE_SIZE)


def default_database_config(config_dir: Path, cache_size: int) -> DatabaseConfig:
    if cache_size <= 0:
        raise ValueError(f"Database cache size must be positive, got {cache_size}")
    return DatabaseConfig(backend=DatabaseBackend.ROCKSDB, root=config_dir, cache_size=cache_size)


def resolve_database_config(
    overrides: ConfigurationOverrides, config_dir: Path, cache_size: int
) -> DatabaseConfig:
    factory = overrides.database_config_factory or default_database_config
    try:
        return factory(config_dir, cache_size)
    except Exception as e:
        raise ConfigurationResolutionException(
            f"Failed to resolve database configuration under `{config_dir}`: {e}"
        ) from e


def resolve_node_name(overrides: ConfigurationOverrides) -> str:
    return overrides.node_name or generate_node_name()


def resolve_node_key(overrides: ConfigurationOverrides, net_config_dir: Path) -> NodeKeyConfig:
    # no secret: the network service generates a fresh ed25519 key on every start
    return _or_default(overrides.node_key, NodeKeyConfig())


def resolve_roles(overrides: ConfigurationOverrides, is_dev: bool) -> Role:
    return _or_default(overrides.roles, Role.FULL)


def resolve_max_runtime_instances(overrides: ConfigurationOverrides) -> int:
    return _or_default(overrides.max_runtime_instances, DEFAULT_MAX_RUNTIME_INSTANCES)


def resolve_transaction_pool(overrides: ConfigurationOverrides) -> TransactionPoolOptions:
    return _or_default(overrides.transaction_pool, TransactionPoolOptions())


def resolve_network_config(
    overrides: ConfigurationOverrides,
    chain_spec: ChainSpec,
    is_dev: bool,
    net_config_dir: Path,
    client_id: str,
    node_name: str,
    node_key: NodeKeyConfig,
) -> NetworkConfiguration:
    if overrides.network is not None:
        return overrides.network
    return NetworkConfiguration(
        node_name=node_name,
        client_version=client_id,
        node_key=node_key,
        net_config_path=net_config_dir,
    )


def resolve_keystore(
    overrides: ConfigurationOverrides, is_dev: bool, config_dir: Path
) -> KeystoreConfig:
    return _or_default(overrides.keystore, KeystoreConfig.in_memory())


def resolve_state_cache_size(overrides: ConfigurationOverrides) -> int:
    return _or_default(overrides.state_cache_size, DEFAULT_STATE_CACHE_SIZE)


def resolve_pruning(overrides: ConfigurationOverrides, is_dev: bool, roles: Role) -> PruningMode:
    return _or_default(overrides.pruning, PruningMode())


def resolve_wasm_method(overrides: ConfigurationOverrides) -> WasmExecutionMethod:
    return _or_default(overrides.wasm_method, WasmExecutionMethod.INTERPRETED)


def resolve_execution_strategies(
    overrides: ConfigurationOverrides, is_dev: bool
) -> ExecutionStrategies:
    return _or_default(overrides.execution_strategies, ExecutionStrategies())


def resolve_rpc_cors(overrides: ConfigurationOverrides, is_dev: bool) -> Optional[Tuple[str, ...]]:
    if overrides.rpc_cors is not UNSET:
        return overrides.rpc_cors
    # an empty tuple allows no cross-origin requests; None would allow any origin
    return ()


def resolve_telemetry_endpoints(
    overrides: ConfigurationOverrides, chain_spec: ChainSpec
) -> Optional[TelemetryEndpoints]:
    if overrides.telemetry_endpoints is not UNSET:
        return overrides.telemetry_endpoints
    return chain_spec.telemetry_endpoints


def resolve_offchain_worker(overrides: ConfigurationOverrides, roles: Role) -> bool:
    return _or_default(overrides.offchain_worker, False)


def resolve_tracing_receiver(overrides: ConfigurationOverrides) -> TracingReceiver:
    return _or_default(overrides.tracing_receiver, TracingReceiver.LOG)
