import math
import numbers

from multipledispatch import dispatch

_namespace = dict()


@dispatch(object, object, namespace=_namespace)
def _expand(item, depth):
    yield item


@dispatch((list, tuple), object, namespace=_namespace)
def _expand(items, depth):
    if depth <= 0:
        yield items
        return
    for item in items:
        yield from _expand(item, depth - 1)


def flat(items, depth=1):
    """
    Flatten nested lists and tuples in items up to depth levels.

    depth=1 removes one level of nesting, math.inf removes all of them and
    depth <= 0 gives a shallow copy. Strings, bytes and mappings are leaves.
    Expansion is recursive, so nesting deeper than the interpreter's
    recursion limit raises RecursionError.

    >>> flat([1, [2, [3]]])
    [1, 2, [3]]
    >>> flat([1, [2, [3]]], math.inf)
    [1, 2, 3]
    """
    if isinstance(depth, bool) or not isinstance(depth, numbers.Real) or math.isnan(depth):
        raise TypeError(f"depth must be a number, got {depth!r}")
    result = []
    for item in items:
        result.extend(_expand(item, depth))
    return result
