"""Reducer factories for LazyPipeline.reduce()."""

from functions import FunctionValue
from records import get_field


def min_by(key_fn):
    """Build a combiner keeping the element with the smallest ``key_fn`` value.

    Ties keep the accumulator, so the earliest minimal element wins. ``key_fn``
    is evaluated on both arguments at every step.
    """
    def choose(acc, candidate):
        if key_fn(candidate) < key_fn(acc):
            return candidate
        return acc

    return FunctionValue(choose, name=f"min_by({getattr(key_fn, '__name__', 'key')})")


def max_by(key_fn):
    """Mirror of min_by: largest key wins, earliest element on ties."""
    def choose(acc, candidate):
        if key_fn(candidate) > key_fn(acc):
            return candidate
        return acc

    return FunctionValue(choose, name=f"max_by({getattr(key_fn, '__name__', 'key')})")


def field_key(name):
    def key(record):
        return get_field(record, name)

    key.__name__ = name
    return key
