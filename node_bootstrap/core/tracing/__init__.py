"""
Scoped timing spans for node bootstrap code.

    from node_bootstrap.core.tracing import enter_span, tracing_span

    with tracing_span("import_block", target="sync"):
        import_block(block)

    @enter_span("resolve_configuration")
    def resolve():
        ...

Whether spans are recorded is decided once, from `span_runtime` in the bootstrap config:
"host" records through OpenTelemetry, "restricted" turns every span into a no-op. Wrapped code
behaves identically either way.
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Optional, TypeVar

from node_bootstrap.core.config import RESTRICTED_SPAN_RUNTIME, bootstrap_config
from node_bootstrap.core.tracing.constants import (
    WASM_NAME_KEY,
    WASM_TARGET_KEY,
    WASM_TRACE_IDENTIFIER,
)
from node_bootstrap.core.tracing.flag import (
    TRACING_ENABLED,
    TracingFlag,
    set_tracing_enabled,
    tracing_enabled,
)
from node_bootstrap.core.tracing.tracing_gateway import TracingGateway, span_decorator

T = TypeVar("T")

__all__ = [
    "WASM_NAME_KEY",
    "WASM_TARGET_KEY",
    "WASM_TRACE_IDENTIFIER",
    "TRACING_ENABLED",
    "TracingFlag",
    "TracingGateway",
    "enter_span",
    "get_tracing_gateway",
    "run_in_span",
    "set_tracing_enabled",
    "tracing_enabled",
    "tracing_span",
]


@lru_cache(maxsize=1)
def get_tracing_gateway() -> TracingGateway:
    """
    Returns the configured tracing gateway. Cached for performance.
    """
    config = bootstrap_config()
    if config.span_runtime == RESTRICTED_SPAN_RUNTIME:
        from node_bootstrap.core.tracing.restricted_tracing_gateway import (
            RestrictedTracingGateway,
        )

        return RestrictedTracingGateway()

    from node_bootstrap.core.tracing.live_tracing_gateway import LiveTracingGateway

    return LiveTracingGateway(service_name=config.tracing_service_name)


def tracing_span(name: str, target: Optional[str] = None, fields: Optional[Dict[str, Any]] = None):
    """Runs the body of a `with` block under a span named `name`."""
    return get_tracing_gateway().create_span(name, target, fields)


def run_in_span(
    name: str, fn: Callable[..., T], *args, target: Optional[str] = None, **kwargs
) -> T:
    return get_tracing_gateway().run_in_span(name, fn, *args, target=target, **kwargs)


def enter_span(name: str, target: Optional[str] = None) -> Callable:
    """Keeps a span named `name` active for the remainder of the decorated function."""
    # the gateway is looked up per call so decorating at import time does not pin it
    return span_decorator(
        lambda span_name, span_target: get_tracing_gateway().create_span(span_name, span_target),
        name,
        target,
    )
