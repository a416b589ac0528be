import functools
import inspect
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Callable, Dict, Optional, TypeVar

from node_bootstrap.core.tracing.span import Span

T = TypeVar("T")


class TracingGateway(ABC):
    """
    Creates scoped spans. Implementations decide whether a span is actually recorded, but must
    never change what the wrapped code returns, raises or does.
    """

    @abstractmethod
    def create_span(
        self,
        name: str,
        target: Optional[str] = None,
        fields: Optional[Dict[str, Any]] = None,
    ) -> AbstractContextManager[Span]:
        """
        Returns a context manager that keeps a span named `name` active for the body of the
        `with` block. The span is completed on every exit from the block, including exceptions,
        which propagate unchanged.
        """

    def run_in_span(
        self,
        name: str,
        fn: Callable[..., T],
        *args,
        target: Optional[str] = None,
        **kwargs,
    ) -> T:
        """
        Calls `fn(*args, **kwargs)` while a span named `name` is active and returns its result.
        `target` is consumed here and never passed on to `fn`.
        """
        with self.create_span(name, target):
            return fn(*args, **kwargs)

    def enter_span(self, name: str, target: Optional[str] = None) -> Callable:
        """
        Decorator form: the span stays active for the rest of the decorated function's scope.
        """
        return span_decorator(self.create_span, name, target)


def span_decorator(
    span_factory: Callable[[str, Optional[str]], AbstractContextManager[Span]],
    name: str,
    target: Optional[str] = None,
) -> Callable:
    """
    Wraps a plain or `async` function so that `span_factory(name, target)` is entered for the
    whole call and exited on return or raise.
    """

    def decorator(fn):
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args, **kwargs):
                with span_factory(name, target):
                    return await fn(*args, **kwargs)

            return async_wrapper

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            with span_factory(name, target):
                return fn(*args, **kwargs)

        return wrapper

    return decorator
