from __future__ import annotations

import inspect
import logging
from typing import Callable, Generic, Optional, Tuple, TypeVar, Union

ReturnType = TypeVar("ReturnType")

logger = logging.getLogger(__name__)


class PlaceholderType(object):
    """Marks a positional slot that a later call has to fill."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "PLACEHOLDER"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "PLACEHOLDER"


PLACEHOLDER = PlaceholderType()


def required_arity(fn: Callable) -> int:
    """Count the leading positional parameters of fn that have no default."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as error:
        raise ValueError(f"cannot inspect {fn!r}, pass the arity explicitly") from error
    count = 0
    for param in signature.parameters.values():
        if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            break
        if param.default is not param.empty:
            break
        count += 1
    return count


def check_arity(fn, arity: Optional[int]) -> int:
    if not callable(fn):
        raise TypeError(f"{fn!r} is not callable")
    if arity is None:
        return required_arity(fn)
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise TypeError(f"arity must be an int, got {type(arity).__name__}")
    if arity < 0:
        raise ValueError(f"arity must be >= 0, got {arity}")
    return arity


def fill_placeholders(pending: Tuple, new_args: Tuple) -> Tuple:
    # placeholders are filled left to right, leftovers are appended
    supply = iter(new_args)
    filled = [next(supply, slot) if slot is PLACEHOLDER else slot for slot in pending]
    filled.extend(supply)
    return tuple(filled)


def is_ready(args: Tuple, arity: int) -> bool:
    return len(args) >= arity and not any(arg is PLACEHOLDER for arg in args[:arity])


class Curried(Generic[ReturnType]):
    """
    A partial application of fn that fills PLACEHOLDER slots on later calls.

    Every call merges its arguments into the pending ones and either invokes
    fn, once the first `arity` slots hold real values, or returns a new
    Curried holding the merged arguments. A Curried is never changed by
    calling it, so one continuation can be reused for independent chains.
    """
    placeholder = PLACEHOLDER

    def __init__(self, fn: Callable[..., ReturnType], arity: Optional[int] = None, args: Tuple = (),
                 kwargs: dict = None) -> None:
        self._fn = fn
        self._arity = check_arity(fn, arity)
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})

    @property
    def func(self):
        return self._fn

    @property
    def arity(self):
        return self._arity

    @property
    def args(self):
        return self._args

    @property
    def keywords(self):
        return dict(self._kwargs)

    def __call__(self, *more_args, **more_kwargs) -> Union[Curried[ReturnType], ReturnType]:
        all_args = fill_placeholders(self._args, more_args)
        all_kwargs = {**self._kwargs, **more_kwargs}
        if is_ready(all_args, self._arity):
            logger.debug("Invoking %r with %d positional arguments", self._fn, len(all_args))
            return self._fn(*all_args, **all_kwargs)
        logger.debug("Waiting on %r, pending %r", self._fn, all_args)
        return Curried(self._fn, self._arity, all_args, all_kwargs)

    def __repr__(self):
        return f"Curried({self._fn}, arity={self._arity}, args={self._args}, kwargs={self._kwargs})"


def make_curried(fn: Callable[..., ReturnType], arity: Optional[int] = None) -> Curried[ReturnType]:
    """
    Return the entry point of a placeholder-aware curry of fn.

    arity is how many leading positional slots must hold non-placeholder
    values before fn runs. When omitted it is read from fn's signature.

    Keyword arguments are collected and forwarded but never count toward
    arity, so a parameter inside the arity window has to be passed
    positionally: make_curried(join)(1, 2, c=3) waits for a third positional
    argument and then fails with a duplicate-argument TypeError.
    """
    return Curried(fn, arity)


def curry(arity: Optional[int] = None) -> Callable[[Callable[..., ReturnType]], Curried[ReturnType]]:
    def decorator(fn: Callable[..., ReturnType]):
        return make_curried(fn, arity)

    return decorator
