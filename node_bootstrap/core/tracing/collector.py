from typing import Any, Mapping, Optional, Tuple

from node_bootstrap.core.tracing.constants import (
    SPAN_TARGET_ATTRIBUTE,
    WASM_NAME_KEY,
    WASM_TARGET_KEY,
    WASM_TRACE_IDENTIFIER,
)
from opentelemetry.context import Context
from opentelemetry.sdk.trace import ReadableSpan, SpanProcessor
from opentelemetry.sdk.trace import Span as SdkSpan


def rehydrate_span_identity(
    name: str, target: Optional[str], fields: Mapping[str, Any]
) -> Tuple[str, Optional[str]]:
    """Returns the real `(name, target)` of a span.

    Spans forwarded from a sandboxed runtime are named :data:`WASM_TRACE_IDENTIFIER` and carry
    their identity in the reserved fields. Any other span is returned as-is, as is a sentinel span
    missing one of the reserved fields.
    """
    if name != WASM_TRACE_IDENTIFIER:
        return name, target
    real_name = fields.get(WASM_NAME_KEY)
    real_target = fields.get(WASM_TARGET_KEY)
    return (
        str(real_name) if real_name is not None else name,
        str(real_target) if real_target is not None else target,
    )


class ProxiedSpanProcessor(SpanProcessor):
    """
    Renames sentinel spans to their real name and target as they start, so exporters registered
    after this processor see the identity the sandboxed runtime intended.
    """

    def on_start(self, span: SdkSpan, parent_context: Optional[Context] = None) -> None:
        if span.name != WASM_TRACE_IDENTIFIER:
            return
        attributes = span.attributes or {}
        name, target = rehydrate_span_identity(
            span.name, attributes.get(SPAN_TARGET_ATTRIBUTE), attributes
        )
        span.update_name(name)
        if target is not None:
            span.set_attribute(SPAN_TARGET_ATTRIBUTE, target)

    def on_end(self, span: ReadableSpan) -> None:
        pass

    def shutdown(self) -> None:
        pass

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return True
