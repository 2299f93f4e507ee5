"""
Windowing and slicing.

take and drop tag every element with its position and cut on the tag, so
they work on infinite sequences and evaluate nothing before it is queried.
"""

from combinators import map, zip
from functions import snd
from sequence import NIL, EmptySequenceError, as_sequence, cons, empty, first, rest, suspend


def _count_from(n):
    return cons(n, lambda: _count_from(n + 1))


def take(n, seq):
    if n <= 0:
        return NIL
    return map(snd, take_while(lambda tagged: tagged[0] < n, zip(_count_from(0), seq)))


def drop(n, seq):
    if n <= 0:
        return as_sequence(seq)
    return map(snd, drop_while(lambda tagged: tagged[0] < n, zip(_count_from(0), seq)))


def split_at(n, seq):
    seq = as_sequence(seq)
    return take(n, seq), drop(n, seq)


def take_while(pred, seq):
    seq = as_sequence(seq)

    def step():
        if empty(seq) or not pred(first(seq)):
            return NIL
        return cons(first(seq), lambda: take_while(pred, rest(seq)))

    return suspend(step)


def drop_while(pred, seq):
    seq = as_sequence(seq)

    def step():
        s = seq
        while not empty(s) and pred(first(s)):
            s = rest(s)
        return s

    return suspend(step)


def span(pred, seq):
    """Longest prefix satisfying pred, and the remainder."""
    seq = as_sequence(seq)
    return take_while(pred, seq), drop_while(pred, seq)


def break_(pred, seq):
    """Longest prefix not satisfying pred, and the remainder."""
    return span(lambda x: not pred(x), seq)


def init(seq):
    """All elements but the last."""
    seq = as_sequence(seq)
    if empty(seq):
        raise EmptySequenceError('init')

    def step(s):
        following = rest(s)
        if empty(following):
            return NIL
        return cons(first(s), lambda: step(following))

    return suspend(lambda: step(seq))


def last(seq):
    seq = as_sequence(seq)
    if empty(seq):
        raise EmptySequenceError('last')
    following = rest(seq)
    while not empty(following):
        seq, following = following, rest(following)
    return first(seq)
