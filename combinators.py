"""
Structural combinators.

Each combinator returns a new sequence that refers to its inputs. An element
is computed when it is asked for with `first`, not when its position is
merely reached, so `empty` and `rest` never call a mapped function. Where
emptiness of the result depends on upstream elements the result is a
suspension, so building a pipeline does not evaluate anything.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from sequence import NIL, FiniteSequence, as_sequence, cons, defer, empty, first, rest, suspend

logger = logging.getLogger(__name__)


def map(func, seq):
    seq = as_sequence(seq)

    def step():
        if empty(seq):
            return NIL
        return defer(lambda: func(first(seq)), lambda: map(func, rest(seq)))

    return suspend(step)


def parallel_map(func, seq, max_workers=None, executor=None):
    """Apply func to every element of a finite sequence concurrently.

    The input is materialized and each element is submitted to an executor;
    results are placed into a buffer by index as they complete, so the
    output keeps the input order. A fresh ThreadPoolExecutor is used unless
    an executor is passed in.
    """
    items = list(as_sequence(seq))
    results = [None] * len(items)
    if not items:
        return FiniteSequence(results)

    if executor is None:
        logger.debug('parallel_map: %d items, max_workers=%s', len(items), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            _collect(pool, func, items, results)
    else:
        logger.debug('parallel_map: %d items on %r', len(items), executor)
        _collect(executor, func, items, results)
    return FiniteSequence(results)


def _collect(executor, func, items, results):
    futures = {executor.submit(func, item): index for index, item in enumerate(items)}
    try:
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    except BaseException:
        for future in futures:
            future.cancel()
        raise


def filter(pred, seq):
    """Elements of seq that satisfy pred.

    Looks past any number of failing elements to find the next match, so
    on an infinite sequence without further matches a query never returns.
    """
    seq = as_sequence(seq)

    def step():
        s = seq
        while not empty(s):
            x = first(s)
            if pred(x):
                tail = s
                return cons(x, lambda: filter(pred, rest(tail)))
            s = rest(s)
        return NIL

    return suspend(step)


def concat(seq, produce_next=None):
    """Concatenate sequences.

    concat(seq, produce_next) is seq followed by the sequence returned by
    produce_next(), which is called once seq is exhausted.
    concat(seqs) flattens a sequence of sequences by one level.
    """
    if produce_next is None:
        return _flatten(seq)
    seq = as_sequence(seq)

    def step():
        if empty(seq):
            return produce_next()
        return defer(lambda: first(seq), lambda: concat(rest(seq), produce_next))

    return suspend(step)


def _flatten(seqs):
    seqs = as_sequence(seqs)

    def step():
        s = seqs
        while not empty(s):
            inner = as_sequence(first(s))
            if not empty(inner):
                tail = s
                return concat(inner, lambda: _flatten(rest(tail)))
            s = rest(s)
        return NIL

    return suspend(step)


def concat_map(func, seq):
    return concat(map(func, seq))


def zip_with(func, xs, ys):
    xs = as_sequence(xs)
    ys = as_sequence(ys)

    def step():
        if empty(xs) or empty(ys):
            return NIL
        return defer(lambda: func(first(xs), first(ys)), lambda: zip_with(func, rest(xs), rest(ys)))

    return suspend(step)


def zip(xs, ys):
    return zip_with(lambda x, y: (x, y), xs, ys)


def unzip(pairs):
    """Split a finite sequence of pairs into a pair of sequences."""
    lefts = []
    rights = []
    for left, right in as_sequence(pairs):
        lefts.append(left)
        rights.append(right)
    return FiniteSequence(lefts), FiniteSequence(rights)


def intersperse(sep, seq):
    seq = as_sequence(seq)

    def step():
        if empty(seq) or empty(rest(seq)):
            return seq
        return defer(lambda: first(seq), lambda: cons(sep, lambda: intersperse(sep, rest(seq))))

    return suspend(step)


def intercalate(sep, seqs):
    """Insert the sequence sep between the sequences of seqs and concatenate
    the result.
    """
    return concat(intersperse(sep, seqs))
