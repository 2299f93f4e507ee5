"""
Self-referential sequences. All of them are infinite unless bounded.
"""

from combinators import concat
from sequence import EmptySequenceError, as_sequence, cons, empty
from slicing import take_while


def iterate(func, x):
    """x, func(x), func(func(x)), ..."""
    return cons(x, lambda: iterate(func, func(x)))


def repeat(x):
    # a single cell whose remainder is itself
    seq = cons(x, lambda: seq)
    return seq


def cycle(seq):
    """Infinite repetition of a finite, non-empty sequence.

    The remainder after the last element is the cycle itself, so the
    elements are evaluated once and then revisited.
    """
    seq = as_sequence(seq)
    if empty(seq):
        raise EmptySequenceError('cycle')
    cycled = concat(seq, lambda: cycled)
    return cycled


def range(start, end=None, step=1):
    """start, start + step, ... up to and including end.

    Without end the sequence is infinite. A negative step counts down.
    """
    numbers = iterate(lambda x: x + step, start)
    if end is None:
        return numbers
    if step < 0:
        return take_while(lambda x: x >= end, numbers)
    return take_while(lambda x: x <= end, numbers)
