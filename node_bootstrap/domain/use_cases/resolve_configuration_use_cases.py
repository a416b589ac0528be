from typing import Optional

from node_bootstrap.common.directories import derive_directories
from node_bootstrap.core.loggers import LoggerTagKey, LoggerTagManager, logger_name, make_logger
from node_bootstrap.core.tracing import TracingGateway, get_tracing_gateway
from node_bootstrap.domain.entities import (
    Configuration,
    ConfigurationOverrides,
    NodeProgram,
    TaskExecutor,
)
from node_bootstrap.domain.gateways import PlatformDirectoryGateway
from node_bootstrap.domain.services import configuration_facets as facets

logger = make_logger(logger_name())

RESOLVE_CONFIGURATION_SPAN = "resolve_configuration"


class ResolveNodeConfigurationUseCase:
    """
    Turns a program description and a sparse set of overrides into a complete
    :class:`Configuration`. Runs once at process start.
    """

    def __init__(
        self,
        platform_directory_gateway: PlatformDirectoryGateway,
        tracing_gateway: Optional[TracingGateway] = None,
    ):
        self.platform_directory_gateway = platform_directory_gateway
        self.tracing_gateway = tracing_gateway or get_tracing_gateway()

    def execute(
        self,
        program: NodeProgram,
        task_executor: TaskExecutor,
        overrides: Optional[ConfigurationOverrides] = None,
    ) -> Configuration:
        """
        Raises:
            ConfigurationResolutionException: if the chain spec or the database configuration
                cannot be resolved
            PlatformDirectoryException: if no base path was given and the platform has no
                default data root
        """
        overrides = overrides or ConfigurationOverrides()
        with self.tracing_gateway.create_span(RESOLVE_CONFIGURATION_SPAN, target=__name__):
            return self._resolve(program, task_executor, overrides)

    def _resolve(
        self,
        program: NodeProgram,
        task_executor: TaskExecutor,
        overrides: ConfigurationOverrides,
    ) -> Configuration:
        chain_spec = facets.resolve_chain_spec(overrides, program)
        is_dev = overrides.is_dev
        LoggerTagManager.set(LoggerTagKey.CHAIN_ID, chain_spec.id)
        LoggerTagManager.set(LoggerTagKey.IMPL_NAME, program.impl_name)

        directories = derive_directories(
            chain_spec.id,
            overrides.base_path,
            lambda: self.platform_directory_gateway.get_app_root(
                program.executable_name, program.author
            ),
        )
        client_id = program.client_id()
        database_cache_size = facets.resolve_database_cache_size(overrides)
        node_key = facets.resolve_node_key(overrides, directories.net_config_dir)
        roles = facets.resolve_roles(overrides, is_dev)
        max_runtime_instances = facets.resolve_max_runtime_instances(overrides)

        node_name = facets.resolve_node_name(overrides)
        LoggerTagManager.set(LoggerTagKey.NODE_NAME, node_name)

        configuration = Configuration(
            impl_name=program.impl_name,
            impl_version=program.impl_version,
            roles=roles,
            task_executor=task_executor,
            transaction_pool=facets.resolve_transaction_pool(overrides),
            network=facets.resolve_network_config(
                overrides,
                chain_spec,
                is_dev,
                directories.net_config_dir,
                client_id,
                node_name,
                node_key,
            ),
            keystore=facets.resolve_keystore(overrides, is_dev, directories.config_dir),
            database=facets.resolve_database_config(
                overrides, directories.config_dir, database_cache_size
            ),
            state_cache_size=facets.resolve_state_cache_size(overrides),
            state_cache_child_ratio=overrides.state_cache_child_ratio,
            pruning=facets.resolve_pruning(overrides, is_dev, roles),
            wasm_method=facets.resolve_wasm_method(overrides),
            execution_strategies=facets.resolve_execution_strategies(overrides, is_dev),
            rpc_http=overrides.rpc_http,
            rpc_ws=overrides.rpc_ws,
            rpc_ws_max_connections=overrides.rpc_ws_max_connections,
            rpc_cors=facets.resolve_rpc_cors(overrides, is_dev),
            prometheus_config=overrides.prometheus_config,
            telemetry_endpoints=facets.resolve_telemetry_endpoints(overrides, chain_spec),
            telemetry_external_transport=overrides.telemetry_external_transport,
            default_heap_pages=overrides.default_heap_pages,
            offchain_worker=facets.resolve_offchain_worker(overrides, roles),
            sentry_mode=bool(overrides.sentry_mode),
            force_authoring=bool(overrides.force_authoring),
            disable_grandpa=bool(overrides.disable_grandpa),
            dev_key_seed=overrides.dev_key_seed,
            tracing_targets=overrides.tracing_targets,
            tracing_receiver=facets.resolve_tracing_receiver(overrides),
            chain_spec=chain_spec,
            max_runtime_instances=max_runtime_instances,
        )
        logger.info(
            f"Resolved configuration for chain `{chain_spec.id}`: node_name={node_name!r} "
            f"roles={roles.value} config_dir=`{directories.config_dir}` dev={is_dev}"
        )
        return configuration
