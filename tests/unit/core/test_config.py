import pytest
from node_bootstrap.core import config
from node_bootstrap.core.config import (
    HOST_SPAN_RUNTIME,
    RESTRICTED_SPAN_RUNTIME,
    BootstrapConfig,
    bootstrap_config,
    config_context,
)


@pytest.fixture
def restricted_config_path(tmp_path):
    path = tmp_path / "restricted.yaml"
    path.write_text(
        "span_runtime: restricted\n"
        "tracing_enabled: true\n"
        "log_level: DEBUG\n"
        "unknown_key: ignored\n"
    )
    return path


def test_default_config():
    default = BootstrapConfig.from_yaml(config.DEFAULT_CONFIG_PATH)
    assert default == BootstrapConfig()
    assert default.span_runtime == HOST_SPAN_RUNTIME
    assert default.tracing_enabled is False


def test_from_yaml(restricted_config_path):
    loaded = BootstrapConfig.from_yaml(restricted_config_path)
    assert loaded.span_runtime == RESTRICTED_SPAN_RUNTIME
    assert loaded.tracing_enabled is True
    assert loaded.log_level == "DEBUG"
    assert loaded.tracing_service_name == "node-bootstrap"


def test_from_yaml_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert BootstrapConfig.from_yaml(path) == BootstrapConfig()


def test_invalid_span_runtime():
    with pytest.raises(ValueError):
        BootstrapConfig(span_runtime="wasm")


def test_config_context(restricted_config_path):
    before = bootstrap_config()
    with config_context(str(restricted_config_path)):
        assert bootstrap_config().span_runtime == RESTRICTED_SPAN_RUNTIME
    assert bootstrap_config() == before


@pytest.mark.parametrize("log_level", ["verbose", "", "Level 5"])
def test_invalid_log_level(log_level):
    with pytest.raises(ValueError):
        BootstrapConfig(log_level=log_level)


def test_log_level_is_case_insensitive():
    assert BootstrapConfig(log_level="debug").log_level == "debug"
