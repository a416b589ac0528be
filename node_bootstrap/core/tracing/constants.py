"""Reserved identifiers for forwarding spans out of a sandboxed runtime.

A sandboxed runtime cannot always name its spans through the host's tracing runtime. It can
instead emit a span named :data:`WASM_TRACE_IDENTIFIER` and carry the real span name and target
in the :data:`WASM_NAME_KEY` and :data:`WASM_TARGET_KEY` fields. Collectors must special-case
that span name and read the identity from the fields, see
:func:`node_bootstrap.core.tracing.collector.rehydrate_span_identity`.

Code that records its own span fields must not use either reserved key.
"""

from typing import Sequence

__all__: Sequence[str] = (
    "WASM_TARGET_KEY",
    "WASM_NAME_KEY",
    "WASM_TRACE_IDENTIFIER",
    "SPAN_TARGET_ATTRIBUTE",
    "DEFAULT_SPAN_TARGET",
)

WASM_TARGET_KEY: str = "target"
WASM_NAME_KEY: str = "name"
WASM_TRACE_IDENTIFIER: str = "wasm_tracing"

# host spans carry their target as an attribute, since OpenTelemetry spans have no target
SPAN_TARGET_ATTRIBUTE: str = "span.target"
DEFAULT_SPAN_TARGET: str = "node_bootstrap"
