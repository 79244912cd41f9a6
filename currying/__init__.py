from currying.curry import PLACEHOLDER, Curried, curry, make_curried
from currying.flatten import flat
from currying.simple import Partial, simple, simple_curry
from currying.throttle import Throttle, throttle

__all__ = [
    "PLACEHOLDER", "Curried", "curry", "make_curried",
    "flat",
    "Partial", "simple", "simple_curry",
    "Throttle", "throttle",
]
