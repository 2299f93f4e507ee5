"""
Folds and scans.

The right-hand variants need the end of the sequence first. They
materialize their input and walk it backward in a loop, so they are bounded
by memory rather than by the recursion limit, and they need a finite input.
"""

from sequence import NIL, EmptySequenceError, FiniteSequence, as_sequence, cons, empty, first, rest


def foldl(func, initial, seq):
    acc = initial
    for x in as_sequence(seq):
        acc = func(acc, x)
    return acc


def foldr(func, initial, seq):
    acc = initial
    for x in reversed(list(as_sequence(seq))):
        acc = func(x, acc)
    return acc


def foldl1(func, seq):
    seq = as_sequence(seq)
    if empty(seq):
        raise EmptySequenceError('foldl1')
    return foldl(func, first(seq), rest(seq))


def foldr1(func, seq):
    seq = as_sequence(seq)
    if empty(seq):
        raise EmptySequenceError('foldr1')
    return foldr(func, first(seq), rest(seq))


def scanl(func, initial, seq):
    """Lazy sequence of the successive accumulator values of foldl,
    starting with initial.
    """
    seq = as_sequence(seq)

    def step():
        if empty(seq):
            return NIL
        return scanl(func, func(initial, first(seq)), rest(seq))

    return cons(initial, step)


def scanl1(func, seq):
    seq = as_sequence(seq)
    if empty(seq):
        raise EmptySequenceError('scanl1')
    return scanl(func, first(seq), rest(seq))


def scanr(func, initial, seq):
    """Successive accumulator values of foldr; the last one is initial."""
    acc = initial
    states = [acc]
    for x in reversed(list(as_sequence(seq))):
        acc = func(x, acc)
        states.append(acc)
    states.reverse()
    return FiniteSequence(states)


def scanr1(func, seq):
    items = list(as_sequence(seq))
    if not items:
        raise EmptySequenceError('scanr1')
    last = items.pop()
    return scanr(func, last, items)


def reverse(seq):
    return foldl(lambda reversed_seq, x: cons(x, reversed_seq), NIL, seq)
