from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Tuple

from node_bootstrap.domain.entities.chain_spec import ChainSpec, TelemetryEndpoints

SocketAddress = Tuple[str, int]
TaskExecutor = Callable[[Awaitable[None]], None]


class Role(str, Enum):
    FULL = "full"
    LIGHT = "light"
    AUTHORITY = "authority"


@dataclass(frozen=True)
class PoolLimit:
    count: int
    total_bytes: int


@dataclass(frozen=True)
class TransactionPoolOptions:
    ready: PoolLimit = PoolLimit(count=8192, total_bytes=20 * 1024 * 1024)
    future: PoolLimit = PoolLimit(count=512, total_bytes=1 * 1024 * 1024)


class NodeKeyType(str, Enum):
    ED25519 = "ed25519"


@dataclass(frozen=True)
class NodeKeyConfig:
    """
    Where the node's network identity key comes from. With neither a secret file nor an inline
    secret, a fresh key is generated by the network service on every start.
    """

    key_type: NodeKeyType = NodeKeyType.ED25519
    secret_file: Optional[Path] = None
    secret_hex: Optional[str] = None


@dataclass(frozen=True)
class NetworkConfiguration:
    node_name: str
    client_version: str
    node_key: NodeKeyConfig
    net_config_path: Path
    listen_addresses: Tuple[str, ...] = ()
    boot_nodes: Tuple[str, ...] = ()
    public_addresses: Tuple[str, ...] = ()
    in_peers: int = 25
    out_peers: int = 25
    allow_private_ipv4: bool = True
    enable_mdns: bool = False


class KeystoreKind(str, Enum):
    IN_MEMORY = "in_memory"
    PATH = "path"


@dataclass(frozen=True)
class KeystoreConfig:
    kind: KeystoreKind = KeystoreKind.IN_MEMORY
    path: Optional[Path] = None
    password: Optional[str] = None

    @classmethod
    def in_memory(cls) -> "KeystoreConfig":
        return cls(kind=KeystoreKind.IN_MEMORY)

    @classmethod
    def at_path(cls, path: Path, password: Optional[str] = None) -> "KeystoreConfig":
        return cls(kind=KeystoreKind.PATH, path=path, password=password)


class DatabaseBackend(str, Enum):
    ROCKSDB = "rocksdb"
    PARITYDB = "paritydb"


@dataclass(frozen=True)
class DatabaseConfig:
    backend: DatabaseBackend
    root: Path
    cache_size: int

    @property
    def path(self) -> Path:
        subdir = "db" if self.backend == DatabaseBackend.ROCKSDB else "paritydb"
        return self.root / subdir


@dataclass(frozen=True)
class PruningMode:
    # None keeps every state (archive node)
    keep_blocks: Optional[int] = 256

    @classmethod
    def archive_all(cls) -> "PruningMode":
        return cls(keep_blocks=None)

    @classmethod
    def keep_last(cls, blocks: int) -> "PruningMode":
        return cls(keep_blocks=blocks)

    @property
    def is_archive(self) -> bool:
        return self.keep_blocks is None


class WasmExecutionMethod(str, Enum):
    INTERPRETED = "interpreted"
    COMPILED = "compiled"


class ExecutionStrategy(str, Enum):
    NATIVE_WHEN_POSSIBLE = "native_when_possible"
    ALWAYS_WASM = "always_wasm"
    BOTH = "both"
    NATIVE_ELSE_WASM = "native_else_wasm"


@dataclass(frozen=True)
class ExecutionStrategies:
    syncing: ExecutionStrategy = ExecutionStrategy.NATIVE_ELSE_WASM
    importing: ExecutionStrategy = ExecutionStrategy.NATIVE_ELSE_WASM
    block_construction: ExecutionStrategy = ExecutionStrategy.ALWAYS_WASM
    offchain_worker: ExecutionStrategy = ExecutionStrategy.NATIVE_WHEN_POSSIBLE
    other: ExecutionStrategy = ExecutionStrategy.NATIVE_WHEN_POSSIBLE


@dataclass(frozen=True)
class PrometheusConfig:
    address: SocketAddress


class TracingReceiver(str, Enum):
    LOG = "log"
    TELEMETRY = "telemetry"


@dataclass(frozen=True)
class Configuration:
    """
    Everything a node needs to start, fully resolved. `None` on an optional facet means the
    feature is disabled, never that the facet was left unresolved.
    """

    impl_name: str
    impl_version: str
    roles: Role
    task_executor: TaskExecutor = field(repr=False, compare=False)
    transaction_pool: TransactionPoolOptions
    network: NetworkConfiguration
    keystore: KeystoreConfig
    database: DatabaseConfig
    state_cache_size: int
    state_cache_child_ratio: Optional[int]
    pruning: PruningMode
    wasm_method: WasmExecutionMethod
    execution_strategies: ExecutionStrategies
    rpc_http: Optional[SocketAddress]
    rpc_ws: Optional[SocketAddress]
    rpc_ws_max_connections: Optional[int]
    # None accepts any origin
    rpc_cors: Optional[Tuple[str, ...]]
    prometheus_config: Optional[PrometheusConfig]
    telemetry_endpoints: Optional[TelemetryEndpoints]
    telemetry_external_transport: Optional[Any]
    default_heap_pages: Optional[int]
    offchain_worker: bool
    sentry_mode: bool
    force_authoring: bool
    disable_grandpa: bool
    dev_key_seed: Optional[str]
    tracing_targets: Optional[str]
    tracing_receiver: TracingReceiver
    chain_spec: ChainSpec
    max_runtime_instances: int
