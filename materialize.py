"""
Materialization: the operations that evaluate a sequence.

Apart from `any` and `all`, which stop at the first decisive element, all of
them walk the whole sequence and never return on an infinite one.
"""

from folds import foldl
from sequence import as_sequence


def to_list(seq):
    return list(as_sequence(seq))


def to_lists(seqs):
    """Materialize each sequence of a tuple, e.g. the result of span."""
    return tuple(to_list(seq) for seq in seqs)


def sort(seq, key=None, reverse=False):
    items = to_list(seq)
    items.sort(key=key, reverse=reverse)
    return items


def _cells(seq):
    # the non-empty suffixes of seq; walking them leaves elements uncomputed
    seq = as_sequence(seq)
    while not seq.is_empty():
        yield seq
        seq = seq.rest()


def length(seq):
    return foldl(lambda n, _: n + 1, 0, _cells(seq))


def any(pred, seq):
    for x in as_sequence(seq):
        if pred(x):
            return True
    return False


def all(pred, seq):
    for x in as_sequence(seq):
        if not pred(x):
            return False
    return True


def elem(x, seq):
    return any(lambda y: y == x, seq)


def not_elem(x, seq):
    return all(lambda y: y != x, seq)


def consume(func, seq):
    """Call func on every element, for its side effects."""
    for x in as_sequence(seq):
        func(x)
