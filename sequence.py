"""
A sequence is a lazy, possibly infinite list.

It is observed through three queries only: `empty`, `first` and `rest`.
A non-empty sequence knows its first element and holds a rule that produces
the remaining sequence the first time it is asked for.

The above definition is implemented by four variants:
> Nil is the empty sequence.
> A Cons is a value, or a producer of it, and a producer of the remaining
> sequence.
> A FiniteSequence is a position in a fixed indexable collection.
> A Suspension is a producer of a whole sequence, emptiness included.

Producers run at most once. Their result is kept in a write-once slot, so
querying the same sequence twice walks the same cells again.
"""

REPR_LIMIT = 20


class EmptySequenceError(LookupError):
    def __init__(self, operation):
        super().__init__('{}: empty sequence'.format(operation))
        self.operation = operation


class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


def _reentered():
    raise RuntimeError('sequence queried while one of its own cells is being computed')


class Sequence:
    __slots__ = ()

    def is_empty(self):
        raise NotImplementedError

    def first(self):
        raise NotImplementedError

    def rest(self):
        raise NotImplementedError

    # Static so that the generator does not keep the head of the sequence alive.
    @staticmethod
    def _iter(seq):
        while not seq.is_empty():
            yield seq.first()
            seq = seq.rest()

    def __iter__(self):
        return self._iter(self)

    def __bool__(self):
        return not self.is_empty()

    def __repr__(self):
        items, complete = evaluated_prefix(self)
        parts = [repr(item) for item in items]
        if not complete:
            parts.append('...')
        return 'Sequence([{}])'.format(', '.join(parts))


class Nil(Singleton, Sequence):
    """The empty sequence"""

    @staticmethod
    def is_empty():
        return True

    @staticmethod
    def first():
        raise EmptySequenceError('first')

    @staticmethod
    def rest():
        raise EmptySequenceError('rest')


NIL = Nil()


class Cons(Sequence):
    __slots__ = '_first', '_produce_first', '_rest', '_produce'

    def __init__(self, value, produce_rest, produce_value=None):
        self._first = value
        self._produce_first = produce_value
        self._rest = None
        self._produce = produce_rest

    @staticmethod
    def is_empty():
        return False

    def first(self):
        if self._produce_first is None:
            return self._first
        produce, self._produce_first = self._produce_first, _reentered
        try:
            value = produce()
        except BaseException:
            self._produce_first = produce
            raise
        self._first = value
        self._produce_first = None
        return value

    def rest(self):
        if self._produce is None:
            return self._rest
        produce, self._produce = self._produce, _reentered
        try:
            remainder = as_sequence(produce())
        except BaseException:
            self._produce = produce
            raise
        self._rest = remainder
        self._produce = None
        return remainder


class FiniteSequence(Sequence):
    """Eagerly-backed sequence over an indexable collection.

    The collection is not copied and must not change while the sequence is
    in use.
    """

    __slots__ = '_items', '_index'

    def __init__(self, items, index=0):
        self._items = items
        self._index = index

    def is_empty(self):
        return self._index >= len(self._items)

    def first(self):
        if self.is_empty():
            raise EmptySequenceError('first')
        return self._items[self._index]

    def rest(self):
        if self.is_empty():
            raise EmptySequenceError('rest')
        return FiniteSequence(self._items, self._index + 1)

    def __len__(self):
        return max(len(self._items) - self._index, 0)


class Suspension(Sequence):
    """A sequence computed as a whole, on the first query."""

    __slots__ = '_forced', '_produce'

    def __init__(self, produce):
        self._forced = None
        self._produce = produce

    def force(self):
        # A producer may return another suspension; follow the chain
        # iteratively and point every link at the final sequence.
        seq = self
        visited = []
        while isinstance(seq, Suspension):
            if seq._produce is not None:
                seq._run()
            visited.append(seq)
            seq = seq._forced
        for suspension in visited:
            suspension._forced = seq
        return seq

    def _run(self):
        produce, self._produce = self._produce, _reentered
        try:
            forced = as_sequence(produce())
        except BaseException:
            self._produce = produce
            raise
        self._forced = forced
        self._produce = None

    def is_empty(self):
        return self.force().is_empty()

    def first(self):
        return self.force().first()

    def rest(self):
        return self.force().rest()


def evaluated_prefix(seq, limit=REPR_LIMIT):
    """Return the elements computed so far and whether that is all of them.

    Nothing is forced. At most `limit` elements are collected, which also
    stops the walk on cyclic sequences.
    """
    items = []
    while len(items) < limit:
        if isinstance(seq, Suspension):
            if seq._produce is not None:
                return items, False
            seq = seq._forced
        elif isinstance(seq, Cons):
            if seq._produce_first is not None:
                return items, False
            items.append(seq._first)
            if seq._produce is not None:
                return items, False
            seq = seq._rest
        elif isinstance(seq, FiniteSequence):
            stop = min(len(seq._items), seq._index + limit - len(items))
            items.extend(seq._items[i] for i in range(seq._index, stop))
            return items, stop >= len(seq._items)
        else:
            return items, seq is NIL
    return items, seq is NIL


def null():
    return NIL


def suspend(produce):
    return Suspension(produce)


def cons(value, rest):
    """Sequence starting with value, followed by rest.

    `rest` is either a function producing the remaining sequence, called
    once when the remainder is first queried, or an iterable already at hand.
    """
    if callable(rest):
        return Cons(value, rest)
    return Cons(value, lambda: rest)


def defer(produce_value, rest):
    """Like cons, but the first element is produce_value(), computed once,
    when it is first queried.
    """
    if callable(rest):
        return Cons(None, rest, produce_value)
    return Cons(None, lambda: rest, produce_value)


def from_iterator(iterator):
    def step():
        for item in iterator:
            return Cons(item, lambda: from_iterator(iterator))
        return NIL

    return Suspension(step)


def as_sequence(xs):
    if isinstance(xs, Sequence):
        return xs
    if hasattr(xs, '__getitem__') and hasattr(xs, '__len__') and not isinstance(xs, dict):
        return FiniteSequence(xs)
    return from_iterator(iter(xs))


def empty(seq):
    return as_sequence(seq).is_empty()


def first(seq):
    return as_sequence(seq).first()


def rest(seq):
    return as_sequence(seq).rest()
