"""
Function values: callables with a fixed arity.

A FunctionValue wraps an ordinary Python callable (usually a closure) and
refuses calls with the wrong number of arguments. Partial application is
always explicit, either through an outer function returning an inner one or
through FunctionValue.partial().
"""

import inspect
from typing import Any, Callable, Optional

from utils import ArityError

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_arity(fn: Callable) -> int:
    """Count the required positional parameters of ``fn``."""
    params = inspect.signature(fn).parameters.values()
    if any(p.kind == inspect.Parameter.VAR_POSITIONAL for p in params):
        raise TypeError(
            f"{getattr(fn, '__name__', fn)!r} is variadic; pass an explicit arity"
        )
    return sum(
        1 for p in params
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


class FunctionValue:
    """A callable with a fixed arity and the environment it closed over."""

    def __init__(self, fn: Callable, arity: Optional[int] = None, name: Optional[str] = None):
        if isinstance(fn, FunctionValue):
            if arity is None:
                arity = fn.arity
            if name is None:
                name = fn.__name__
            fn = fn._fn
        if arity is None:
            arity = positional_arity(fn)
        if arity < 0:
            raise ValueError("Arity must be >= 0")
        self._fn = fn
        self.arity = arity
        self.__name__ = name or getattr(fn, "__name__", "<function>")
        self.__doc__ = getattr(fn, "__doc__", None)

    def __call__(self, *args: Any) -> Any:
        if len(args) != self.arity:
            raise ArityError(self.__name__, self.arity, len(args))
        return self._fn(*args)

    def partial(self, *args: Any) -> "FunctionValue":
        """Fix the leading ``args``; the result takes the remaining ones."""
        if len(args) > self.arity:
            raise ArityError(self.__name__, self.arity, len(args))
        fn = self._fn

        def applied(*rest):
            return fn(*args, *rest)

        return FunctionValue(applied, arity=self.arity - len(args), name=self.__name__)

    def __repr__(self) -> str:
        return f"<FunctionValue {self.__name__}/{self.arity}>"


def function(fn: Optional[Callable] = None, *, arity: Optional[int] = None):
    """Decorator turning a plain function into a FunctionValue.

    Usable bare (``@function``) or with an explicit arity
    (``@function(arity=2)``).
    """
    def wrap(target):
        return FunctionValue(target, arity=arity)

    if fn is None:
        return wrap
    return wrap(fn)
