from pathlib import Path
from typing import Dict, List, Tuple

import pytest
from node_bootstrap.core.domain_exceptions import PlatformDirectoryException
from node_bootstrap.core.tracing.collector import ProxiedSpanProcessor
from node_bootstrap.core.tracing.flag import TracingFlag
from node_bootstrap.core.tracing.live_tracing_gateway import LiveTracingGateway
from node_bootstrap.domain.entities import ChainSpec, NodeProgram, TelemetryEndpoints
from node_bootstrap.domain.gateways import PlatformDirectoryGateway
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter


class FakePlatformDirectoryGateway(PlatformDirectoryGateway):
    def __init__(self, root: Path):
        self.root = root
        self.calls: List[Tuple[str, str]] = []

    def get_app_root(self, app_name: str, author: str) -> Path:
        self.calls.append((app_name, author))
        return self.root


class UnavailablePlatformDirectoryGateway(PlatformDirectoryGateway):
    def get_app_root(self, app_name: str, author: str) -> Path:
        raise PlatformDirectoryException(app_name=app_name, author=author)


class FakeNodeProgram(NodeProgram):
    impl_name = "Test Node"
    impl_version = "2.0.0-abc1234"
    executable_name = "test-node"
    author = "test-author"

    def __init__(self, specs: Dict[str, ChainSpec]):
        self.specs = specs
        self.loaded: List[str] = []

    def load_spec(self, chain_id: str) -> ChainSpec:
        self.loaded.append(chain_id)
        if chain_id not in self.specs:
            raise KeyError(f"Unknown chain {chain_id!r}")
        return self.specs[chain_id]


def noop_task_executor(future) -> None:
    pass


@pytest.fixture
def testnet_chain_spec() -> ChainSpec:
    return ChainSpec(
        id="testnet",
        name="Test Network",
        boot_nodes=("/dns4/boot.testnet.example/tcp/30333/p2p/12D3KooWtest",),
        telemetry_endpoints=TelemetryEndpoints(
            endpoints=(("wss://telemetry.testnet.example/submit/", 0),)
        ),
    )


@pytest.fixture
def fake_node_program(testnet_chain_spec: ChainSpec) -> FakeNodeProgram:
    dev_spec = ChainSpec(id="dev", name="Development")
    return FakeNodeProgram(specs={"": dev_spec, "dev": dev_spec, "testnet": testnet_chain_spec})


@pytest.fixture
def fake_platform_directory_gateway(tmp_path: Path) -> FakePlatformDirectoryGateway:
    return FakePlatformDirectoryGateway(root=tmp_path / "platform-data" / "test-node")


@pytest.fixture
def unavailable_platform_directory_gateway() -> UnavailablePlatformDirectoryGateway:
    return UnavailablePlatformDirectoryGateway()


@pytest.fixture
def task_executor():
    return noop_task_executor


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    provider = TracerProvider()
    # rehydration has to run before the exporter sees the span
    provider.add_span_processor(ProxiedSpanProcessor())
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture
def test_tracer(tracer_provider: TracerProvider):
    return tracer_provider.get_tracer("node-bootstrap-tests")


@pytest.fixture
def live_tracing_gateway(test_tracer) -> LiveTracingGateway:
    return LiveTracingGateway(tracer=test_tracer)


@pytest.fixture
def enabled_tracing_flag() -> TracingFlag:
    flag = TracingFlag()
    flag.set(True)
    return flag
