from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from node_bootstrap.core.tracing.constants import DEFAULT_SPAN_TARGET
from node_bootstrap.core.tracing.span import Span
from node_bootstrap.core.tracing.tracing_gateway import TracingGateway


class RestrictedTracingGateway(TracingGateway):
    """
    Gateway for runtimes without a host tracing runtime, e.g. a sandboxed executor. Every span
    operation is a no-op: the wrapped block still runs, nothing is timed or exported.
    """

    @contextmanager
    def create_span(
        self,
        name: str,
        target: Optional[str] = None,
        fields: Optional[Dict[str, Any]] = None,
    ) -> Generator[Span, None, None]:
        yield Span(name=name, target=target or DEFAULT_SPAN_TARGET, fields=dict(fields or {}))
