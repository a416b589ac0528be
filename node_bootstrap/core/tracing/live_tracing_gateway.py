from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from node_bootstrap.core.tracing.constants import DEFAULT_SPAN_TARGET, SPAN_TARGET_ATTRIBUTE
from node_bootstrap.core.tracing.span import Span
from node_bootstrap.core.tracing.tracing_gateway import TracingGateway
from node_bootstrap.core.utils.timer import timer
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode


class LiveTracingGateway(TracingGateway):
    """
    Records spans through the OpenTelemetry tracer of the host process.

    Spans are always created, whether or not the process-wide tracing flag is set.
    """

    def __init__(
        self,
        tracer: Optional[trace.Tracer] = None,
        service_name: str = "node-bootstrap",
    ):
        self._tracer = tracer or trace.get_tracer(service_name)

    @contextmanager
    def create_span(
        self,
        name: str,
        target: Optional[str] = None,
        fields: Optional[Dict[str, Any]] = None,
    ) -> Generator[Span, None, None]:
        target = target or DEFAULT_SPAN_TARGET
        fields = dict(fields or {})
        record = Span(name=name, target=target, fields=fields)

        with self._tracer.start_as_current_span(
            name,
            attributes={SPAN_TARGET_ATTRIBUTE: target, **fields},
            record_exception=False,
            set_status_on_exception=False,
        ) as otel_span:
            span_context = otel_span.get_span_context()
            if span_context.is_valid:
                record.trace_id = format(span_context.trace_id, "032x")
                record.span_id = format(span_context.span_id, "016x")

            span_timer = timer()
            try:
                with span_timer:
                    record.start_time_ns = span_timer.started_at_ns
                    yield record
                otel_span.set_status(Status(StatusCode.OK))
            except Exception as e:
                otel_span.set_status(Status(StatusCode.ERROR, str(e)))
                otel_span.record_exception(e)
                raise
            finally:
                record.duration_seconds = span_timer.duration
                otel_span.set_attribute("duration_seconds", record.duration_seconds)
