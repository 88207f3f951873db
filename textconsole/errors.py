"""Exception types raised by the console."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


class ConsoleError(Exception):
    """Base exception for textconsole."""


class ArityError(ConsoleError, TypeError):
    """Raised when a public console call receives the wrong number of arguments."""

    def __init__(self, name: str):
        super().__init__(f"You should pass exactly 1 argument to {name}")
        self.name = name


class GatewayError(ConsoleError):
    """Raised when the prompt gateway cannot be reached at all."""


def exact_arity(func: F) -> F:
    """Reject calls whose positional arguments don't bind to ``func``'s signature.

    Binding happens before the wrapped method runs, so nothing is buffered or
    prompted when the call is malformed.
    """
    signature = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            signature.bind(*args, **kwargs)
        except TypeError:
            raise ArityError(func.__name__) from None
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
