"""Host-side span bookkeeping for a sandboxed runtime.

The sandbox cannot hold host span objects, so it asks the proxy to open a span and gets back an
integer id, which it later hands back to close the span. Spans opened this way are named
:data:`WASM_TRACE_IDENTIFIER` and carry the sandbox's span name and target in the reserved
fields.
"""

from typing import List, Optional, Tuple

from node_bootstrap.core.loggers import logger_name, make_logger
from node_bootstrap.core.tracing.constants import (
    WASM_NAME_KEY,
    WASM_TARGET_KEY,
    WASM_TRACE_IDENTIFIER,
)
from node_bootstrap.core.tracing.flag import TRACING_ENABLED, TracingFlag
from opentelemetry import trace

logger = make_logger(logger_name())

MAX_SPANS_LEN: int = 1000
# returned by create_span when the tracing flag is off; exit_span ignores it
NO_SPAN_ID: int = 0


class TracingProxy:
    def __init__(
        self,
        tracer: Optional[trace.Tracer] = None,
        flag: TracingFlag = TRACING_ENABLED,
        max_spans: int = MAX_SPANS_LEN,
    ):
        self._tracer = tracer or trace.get_tracer(__name__)
        self._flag = flag
        self._max_spans = max_spans
        self._next_id = NO_SPAN_ID
        self._spans: List[Tuple[int, trace.Span]] = []

    @property
    def open_span_ids(self) -> List[int]:
        return [span_id for span_id, _ in self._spans]

    def create_span(self, proxied_target: str, proxied_name: str) -> int:
        if not self._flag.is_enabled():
            return NO_SPAN_ID

        self._next_id += 1
        parent_context = trace.set_span_in_context(self._spans[-1][1]) if self._spans else None
        span = self._tracer.start_span(
            WASM_TRACE_IDENTIFIER,
            context=parent_context,
            attributes={WASM_TARGET_KEY: proxied_target, WASM_NAME_KEY: proxied_name},
        )
        self._spans.append((self._next_id, span))

        if len(self._spans) > self._max_spans:
            logger.warning(
                f"MAX_SPANS_LEN of {self._max_spans} exceeded, closing the oldest span. "
                "The sandbox is probably not exiting its spans."
            )
            _, oldest = self._spans.pop(0)
            oldest.end()
        return self._next_id

    def exit_span(self, span_id: int) -> None:
        if span_id == NO_SPAN_ID:
            return
        if span_id not in self.open_span_ids:
            logger.warning(f"Span id not found: {span_id}")
            return

        while self._spans:
            last_id, span = self._spans.pop()
            if last_id == span_id:
                span.end()
                return
            # spans opened after the one being exited were never closed by the sandbox
            logger.warning(f"Span ids not equal! id parameter given: {span_id}, last span: {last_id}")
            span.set_attribute("is_valid_trace", False)
            span.end()

    def close(self) -> None:
        while self._spans:
            _, span = self._spans.pop()
            span.end()

    def __enter__(self) -> "TracingProxy":
        return self

    def __exit__(self, *args) -> None:
        self.close()
