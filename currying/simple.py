from __future__ import annotations
from typing import Callable, Generic, Optional, TypeVar, Union

from currying.curry import check_arity

ReturnType = TypeVar("ReturnType")


def simple(num_args: Optional[int] = None) -> Callable[[Callable[..., ReturnType]], Partial[ReturnType]]:
    def decorator(fn: Callable[..., ReturnType]):
        return simple_curry(fn, num_args)

    return decorator


def simple_curry(fn: Callable[..., ReturnType], num_args: Optional[int] = None) -> Partial[ReturnType]:
    """Curry fn without placeholder support; keyword arguments count toward num_args."""
    return Partial(check_arity(fn, num_args), fn)


class Partial(Generic[ReturnType]):
    def __init__(self, num_args: int, fn: Callable[..., ReturnType], args: tuple = (), kwargs: dict = None) -> None:
        self.num_args = num_args
        self.fn = fn
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})

    def __call__(self, *more_args, **more_kwargs) -> Union[Partial[ReturnType], ReturnType]:
        all_args = self.args + more_args
        all_kwargs = {**self.kwargs, **more_kwargs}
        if len(all_args) + len(all_kwargs) >= self.num_args:
            return self.fn(*all_args, **all_kwargs)
        else:
            return Partial(self.num_args, self.fn, all_args, all_kwargs)

    def __repr__(self):
        return f"Partial({self.fn}, args={self.args}, kwargs={self.kwargs})"
