from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Tuple, Union

from node_bootstrap.domain.entities.chain_spec import ChainSpec, TelemetryEndpoints
from node_bootstrap.domain.entities.configuration import (
    DatabaseConfig,
    ExecutionStrategies,
    KeystoreConfig,
    NetworkConfiguration,
    NodeKeyConfig,
    PrometheusConfig,
    PruningMode,
    Role,
    SocketAddress,
    TracingReceiver,
    TransactionPoolOptions,
    WasmExecutionMethod,
)


class _Unset:
    """Marks an override that was not supplied, for facets where `None` is a real value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

DatabaseConfigFactory = Callable[[Path, int], DatabaseConfig]


@dataclass
class ConfigurationOverrides:
    """
    The caller's choices for a node configuration. Every field left at its default resolves to
    the documented default for that facet.

    `rpc_cors` and `telemetry_endpoints` use :data:`UNSET` as "not supplied" because `None` is a
    meaningful override for them (accept any origin, disable telemetry).
    """

    is_dev: bool = False
    base_path: Optional[Path] = None
    chain_id: Optional[str] = None
    chain_spec: Optional[ChainSpec] = None
    node_name: Optional[str] = None
    node_key: Optional[NodeKeyConfig] = None
    roles: Optional[Role] = None
    transaction_pool: Optional[TransactionPoolOptions] = None
    network: Optional[NetworkConfiguration] = None
    keystore: Optional[KeystoreConfig] = None
    database_cache_size: Optional[int] = None
    database_config_factory: Optional[DatabaseConfigFactory] = None
    state_cache_size: Optional[int] = None
    state_cache_child_ratio: Optional[int] = None
    pruning: Optional[PruningMode] = None
    wasm_method: Optional[WasmExecutionMethod] = None
    execution_strategies: Optional[ExecutionStrategies] = None
    rpc_http: Optional[SocketAddress] = None
    rpc_ws: Optional[SocketAddress] = None
    rpc_ws_max_connections: Optional[int] = None
    rpc_cors: Union[Tuple[str, ...], None, _Unset] = UNSET
    prometheus_config: Optional[PrometheusConfig] = None
    telemetry_endpoints: Union[TelemetryEndpoints, None, _Unset] = UNSET
    telemetry_external_transport: Optional[Any] = None
    default_heap_pages: Optional[int] = None
    offchain_worker: Optional[bool] = None
    sentry_mode: Optional[bool] = None
    force_authoring: Optional[bool] = None
    disable_grandpa: Optional[bool] = None
    dev_key_seed: Optional[str] = None
    tracing_targets: Optional[str] = None
    tracing_receiver: Optional[TracingReceiver] = None
    max_runtime_instances: Optional[int] = None
