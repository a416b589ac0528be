import threading
from typing import Sequence

from node_bootstrap.core.domain_exceptions import TracingFlagAlreadySetException

__all__: Sequence[str] = (
    "TracingFlag",
    "TRACING_ENABLED",
    "set_tracing_enabled",
    "tracing_enabled",
)


class TracingFlag:
    """A boolean that is written at most once and read from any thread.

    Reads go through :meth:`threading.Event.is_set`, a plain attribute load that never takes a
    lock. The single write happens during process initialization, before the readers that matter
    start, and is visible to every read after it.

    The flag does not gate span creation. Consumers such as the
    :class:`~node_bootstrap.core.tracing.proxy.TracingProxy` read it to decide whether to
    forward traces from a sandboxed runtime.
    """

    def __init__(self) -> None:
        self._enabled = threading.Event()
        self._write_lock = threading.Lock()
        self._written = False

    def set(self, enabled: bool) -> None:
        with self._write_lock:
            if self._written:
                raise TracingFlagAlreadySetException(
                    "The tracing flag can only be set once per process"
                )
            self._written = True
            if enabled:
                self._enabled.set()

    def is_enabled(self) -> bool:
        return self._enabled.is_set()

    @property
    def is_written(self) -> bool:
        return self._written

    def __bool__(self) -> bool:
        return self.is_enabled()


TRACING_ENABLED = TracingFlag()


def tracing_enabled() -> bool:
    return TRACING_ENABLED.is_enabled()


def set_tracing_enabled(enabled: bool) -> None:
    TRACING_ENABLED.set(enabled)
