from pathlib import Path

import pytest
from node_bootstrap.core.domain_exceptions import ConfigurationResolutionException
from node_bootstrap.domain.entities import (
    UNSET,
    ChainSpec,
    ConfigurationOverrides,
    DatabaseBackend,
    DatabaseConfig,
    ExecutionStrategies,
    KeystoreConfig,
    KeystoreKind,
    NetworkConfiguration,
    NodeKeyConfig,
    NodeKeyType,
    PruningMode,
    Role,
    TracingReceiver,
    WasmExecutionMethod,
)
from node_bootstrap.domain.services import configuration_facets as facets


def test_resolve_chain_spec_prefers_explicit_spec(fake_node_program, testnet_chain_spec):
    overrides = ConfigurationOverrides(chain_id="dev", chain_spec=testnet_chain_spec)
    assert facets.resolve_chain_spec(overrides, fake_node_program) is testnet_chain_spec
    assert fake_node_program.loaded == []


def test_resolve_chain_spec_loads_default_chain(fake_node_program):
    chain_spec = facets.resolve_chain_spec(ConfigurationOverrides(), fake_node_program)
    assert chain_spec.id == "dev"
    assert fake_node_program.loaded == [""]


def test_resolve_chain_spec_wraps_loader_failure(fake_node_program):
    with pytest.raises(ConfigurationResolutionException) as exc_info:
        facets.resolve_chain_spec(ConfigurationOverrides(chain_id="nope"), fake_node_program)
    assert isinstance(exc_info.value.__cause__, KeyError)


def test_resolve_database_cache_size_never_fails():
    assert facets.resolve_database_cache_size(ConfigurationOverrides()) == 128
    assert facets.resolve_database_cache_size(ConfigurationOverrides(database_cache_size=256)) == 256
    assert facets.resolve_database_cache_size(ConfigurationOverrides(database_cache_size=0)) == 0


@pytest.mark.parametrize("cache_size", [0, -1])
def test_default_database_step_rejects_non_positive_cache_size(cache_size):
    with pytest.raises(ConfigurationResolutionException) as exc_info:
        facets.resolve_database_config(ConfigurationOverrides(), Path("/data"), cache_size)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_default_database_config():
    database = facets.default_database_config(Path("/data/node1/chains/testnet"), 128)
    assert database == DatabaseConfig(
        backend=DatabaseBackend.ROCKSDB, root=Path("/data/node1/chains/testnet"), cache_size=128
    )
    assert database.path == Path("/data/node1/chains/testnet/db")


def test_resolve_database_config_wraps_factory_failure():
    def failing_factory(config_dir, cache_size):
        raise OSError("read-only file system")

    overrides = ConfigurationOverrides(database_config_factory=failing_factory)
    with pytest.raises(ConfigurationResolutionException) as exc_info:
        facets.resolve_database_config(overrides, Path("/data"), 128)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_resolve_node_name_prefers_override():
    assert facets.resolve_node_name(ConfigurationOverrides(node_name="alice")) == "alice"
    assert len(facets.resolve_node_name(ConfigurationOverrides())) < 32


def test_resolve_node_key_defaults_to_fresh_ed25519_key():
    node_key = facets.resolve_node_key(ConfigurationOverrides(), Path("/net"))
    assert node_key == NodeKeyConfig()
    assert node_key.key_type == NodeKeyType.ED25519
    assert node_key.secret_file is None
    assert node_key.secret_hex is None

    explicit = NodeKeyConfig(secret_file=Path("/net/secret_ed25519"))
    assert facets.resolve_node_key(ConfigurationOverrides(node_key=explicit), Path("/net")) is explicit


@pytest.mark.parametrize("is_dev", [False, True])
def test_resolve_roles(is_dev):
    assert facets.resolve_roles(ConfigurationOverrides(), is_dev) == Role.FULL
    assert facets.resolve_roles(ConfigurationOverrides(roles=Role.LIGHT), is_dev) == Role.LIGHT


@pytest.mark.parametrize("is_dev", [False, True])
def test_resolve_network_config(testnet_chain_spec, is_dev):
    node_key = facets.resolve_node_key(ConfigurationOverrides(), Path("/net"))
    network = facets.resolve_network_config(
        ConfigurationOverrides(),
        testnet_chain_spec,
        is_dev,
        Path("/net"),
        "Test Node/v2.0.0",
        "alice",
        node_key,
    )

    assert network == NetworkConfiguration(
        node_name="alice",
        client_version="Test Node/v2.0.0",
        node_key=node_key,
        net_config_path=Path("/net"),
    )
    assert network.listen_addresses == ()
    assert network.boot_nodes == ()


@pytest.mark.parametrize("is_dev", [False, True])
def test_resolve_keystore(is_dev):
    keystore = facets.resolve_keystore(ConfigurationOverrides(), is_dev, Path("/cfg"))
    assert keystore.kind == KeystoreKind.IN_MEMORY
    assert keystore.path is None

    on_disk = KeystoreConfig.at_path(Path("/cfg/keystore"))
    overrides = ConfigurationOverrides(keystore=on_disk)
    assert facets.resolve_keystore(overrides, is_dev, Path("/cfg")) is on_disk


@pytest.mark.parametrize(
    "is_dev,roles",
    [(False, Role.FULL), (False, Role.AUTHORITY), (True, Role.FULL), (True, Role.AUTHORITY)],
)
def test_resolve_pruning(is_dev, roles):
    pruning = facets.resolve_pruning(ConfigurationOverrides(), is_dev, roles)
    assert pruning == PruningMode.keep_last(256)
    assert not pruning.is_archive

    archive = ConfigurationOverrides(pruning=PruningMode.archive_all())
    assert facets.resolve_pruning(archive, is_dev, roles).is_archive


@pytest.mark.parametrize("is_dev", [False, True])
def test_resolve_execution_strategies(is_dev):
    assert facets.resolve_execution_strategies(ConfigurationOverrides(), is_dev) == (
        ExecutionStrategies()
    )


@pytest.mark.parametrize("is_dev", [False, True])
def test_resolve_rpc_cors(is_dev):
    # no origins allowed by default, in dev mode too
    assert facets.resolve_rpc_cors(ConfigurationOverrides(), is_dev) == ()
    assert facets.resolve_rpc_cors(ConfigurationOverrides(rpc_cors=None), is_dev) is None
    assert facets.resolve_rpc_cors(
        ConfigurationOverrides(rpc_cors=("http://example.com",)), is_dev
    ) == ("http://example.com",)


def test_resolve_telemetry_endpoints(testnet_chain_spec):
    assert facets.resolve_telemetry_endpoints(ConfigurationOverrides(), testnet_chain_spec) == (
        testnet_chain_spec.telemetry_endpoints
    )
    disabled = ConfigurationOverrides(telemetry_endpoints=None)
    assert facets.resolve_telemetry_endpoints(disabled, testnet_chain_spec) is None
    assert facets.resolve_telemetry_endpoints(
        ConfigurationOverrides(), ChainSpec(id="local", name="Local")
    ) is None


@pytest.mark.parametrize("roles", list(Role))
def test_resolve_offchain_worker(roles):
    assert facets.resolve_offchain_worker(ConfigurationOverrides(), roles) is False
    assert facets.resolve_offchain_worker(ConfigurationOverrides(offchain_worker=True), roles) is True


def test_simple_defaults():
    overrides = ConfigurationOverrides()
    assert facets.resolve_state_cache_size(overrides) == 0
    assert facets.resolve_max_runtime_instances(overrides) == 8
    assert facets.resolve_wasm_method(overrides) == WasmExecutionMethod.INTERPRETED
    assert facets.resolve_tracing_receiver(overrides) == TracingReceiver.LOG
    pool = facets.resolve_transaction_pool(overrides)
    assert pool.ready.count == 8192
    assert pool.future.total_bytes == 1024 * 1024


def test_unset_is_falsy_singleton():
    assert not UNSET
    assert type(UNSET)() is UNSET
