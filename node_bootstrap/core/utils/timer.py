"""Utilities for timing code blocks."""
import time
from datetime import timedelta
from logging import Logger
from typing import Optional


class timer:  # pylint: disable=invalid-name
    """Context manager for timing a block of code.

    Directly use the timer and grab `duration` after the context block has finished:

    >>> with timer() as block_timer:
    >>>     resolve()
    >>> print(f"{block_timer.duration:0.4f}s")

    The duration is in seconds, as a `float`. `started_at_ns` is the wall-clock start of the
    block in nanoseconds since the epoch, which is what span records carry as their start time.

    Passing a `logger` and a `name` logs the duration when the block exits:

    >>> with timer(logger=log, name="resolve_configuration"):
    >>>     resolve()
    """

    __slots__ = ("logger", "name", "_duration", "start", "started_at_ns")

    def __init__(self, logger: Optional[Logger] = None, name: str = "") -> None:
        self.logger = logger
        self.name = name
        self._duration: Optional[float] = None
        # -1 is the uninitialized value, set by __enter__
        self.start: float = -1.0
        self.started_at_ns: int = -1

    def __enter__(self) -> "timer":
        self.started_at_ns = time.time_ns()
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        # measure before any validation so the check does not add latency
        self._duration = time.perf_counter() - self.start
        if self.start == -1:
            raise ValueError(
                "Cannot use context-block exit method if context-block enter method has not been "
                "called!"
            )
        if self.logger is not None:
            metric_name = f"timer.{self.name}" if self.name else "timer"
            self.logger.info(f"{metric_name} - {self._duration:5.4f}s", stacklevel=2)

    @property
    def duration(self) -> float:
        """The number of seconds from when the context block was entered until it was exited.

        Raises ValueError if the context block was either never entered, or entered but not exited.
        """
        if self._duration is None:
            raise ValueError("Cannot get duration if timer has not exited context block!")
        return self._duration

    @property
    def timedelta(self) -> timedelta:
        return timedelta(seconds=self.duration)

    def __float__(self) -> float:
        return self.duration

    def __format__(self, format_spec: str) -> str:
        return f"{self.duration:{format_spec}}"
