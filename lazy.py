import logging

from utils import EmptySequenceError, ExhaustedIteratorError

logger = logging.getLogger('record_pipeline.lazy')

_NOTHING = object()


class _Source:
    """The collection a pipeline reads from. It can be driven only once."""

    def __init__(self, items):
        self._items = items
        self.exhausted = False

    def open(self):
        if self.exhausted:
            raise ExhaustedIteratorError("Pipeline source has already been consumed")
        it = iter(self._items)
        self.exhausted = True
        return it


class LazyPipeline:
    """
    A chainable, lazy, single-pass pipeline. Stages are stored and applied
    only when a terminal operation drives it; each element passes through
    every stage before the next one is pulled from the source.
    """
    def __init__(self, source, ops=None):
        if not isinstance(source, _Source):
            source = _Source(source)
        self._source = source
        self._ops = ops or []          # sequence of ("op_name", callable/arg)

    # --------- chainable operators (lazy) ----------
    def map(self, fn):
        return self._with_op(("map", fn))

    def filter(self, pred):
        return self._with_op(("filter", pred))

    def skip(self, n):
        n = int(n)
        if n < 0:
            raise ValueError("skip() count must be >= 0")
        return self._with_op(("skip", n))

    def take(self, n):
        n = int(n)
        if n < 0:
            raise ValueError("take() count must be >= 0")
        return self._with_op(("take", n))

    @property
    def exhausted(self):
        """Whether the shared source has already been driven."""
        return self._source.exhausted

    # --------- reducing operations (force evaluation) ----------
    def reduce(self, combiner, initial=_NOTHING):
        """Fold items left to right with ``combiner(accumulator, item)``.

        Without ``initial`` the first item seeds the accumulator and an empty
        sequence raises EmptySequenceError. With it, an empty sequence
        returns ``initial`` unchanged.
        """
        it = self._drive()
        if initial is _NOTHING:
            try:
                acc = next(it)
            except StopIteration:
                raise EmptySequenceError(
                    "reduce() of empty sequence with no initial value"
                ) from None
        else:
            acc = initial
        for item in it:
            acc = combiner(acc, item)
        logger.debug("Reduced to %r", acc)
        return acc

    def to_list(self):
        return list(self._drive())

    def count(self):
        """Return the count of elements"""
        count = 0
        for _ in self._drive():
            count += 1
        return count

    def first(self, default=None):
        """Return the first element, or default if empty"""
        for item in self._drive():
            return item
        return default

    # --------- iterator protocol ----------
    def __iter__(self):
        return self._drive()

    # --------- helpers ----------
    def _drive(self):
        it = self._source.open()
        logger.debug(
            "Driving pipeline with %d stage(s): %s",
            len(self._ops), ", ".join(op for op, _ in self._ops) or "none",
        )
        for op, arg in self._ops:
            if op == "map":
                it = _map(it, arg)
            elif op == "filter":
                it = _filter(it, arg)
            elif op == "skip":
                it = _skip(it, arg)
            elif op == "take":
                it = _take(it, arg)
            else:
                raise ValueError(f"Unknown op: {op}")
        return it

    def _with_op(self, op_tuple):
        return LazyPipeline(self._source, self._ops + [op_tuple])


def _map(gen, fn):
    for x in gen:
        yield fn(x)


def _filter(gen, pred):
    for x in gen:
        if pred(x):
            yield x


def _skip(gen, k):
    skipped = 0
    for x in gen:
        if skipped < k:
            skipped += 1
            continue
        yield x


def _take(gen, n):
    if n == 0:
        return
    taken = 0
    for x in gen:
        yield x
        taken += 1
        if taken >= n:
            return


def iterate(items):
    """Wrap a finite collection as the source stage of a lazy pipeline."""
    return LazyPipeline(items)
