from pytest import raises

from combinators import concat, map
from generators import range, repeat
from materialize import length, to_list, to_lists
from sequence import NIL, EmptySequenceError, as_sequence
from slicing import break_, drop, drop_while, init, last, span, split_at, take, take_while


def test_take():
    assert to_list(take(3, [1, 2, 3, 4, 5])) == [1, 2, 3]
    assert to_list(take(10, [1, 2])) == [1, 2]


def test_take_nothing():
    assert to_list(take(0, [1, 2])) == []
    assert to_list(take(-1, [1, 2])) == []
    assert take(-1, repeat(1)) is NIL


def test_take_infinite():
    assert to_list(take(4, repeat(2))) == [2, 2, 2, 2]


def test_take_evaluates_only_what_is_needed():
    calls = []

    def record(x):
        calls.append(x)
        return x

    prefix = take(2, map(record, [1, 2, 3, 4]))
    assert calls == []
    assert to_list(prefix) == [1, 2]
    assert calls[:2] == [1, 2]
    assert 4 not in calls


def test_take_whole_sequence():
    items = [3, 1, 2]
    assert to_list(take(length(items), items)) == items


def test_drop():
    assert to_list(drop(3, [6, 5, 4, 3, 2, 1])) == [3, 2, 1]
    assert to_list(drop(10, [1, 2])) == []


def test_drop_nothing_returns_the_sequence():
    seq = as_sequence([1, 2])
    assert drop(0, seq) is seq
    assert drop(-3, seq) is seq


def test_drop_infinite():
    assert to_list(take(2, drop(5, range(1)))) == [6, 7]


def test_drop_is_lazy():
    calls = []

    def record(x):
        calls.append(x)
        return x

    suffix = drop(2, map(record, [1, 2, 3]))
    assert calls == []
    assert to_list(suffix) == [3]


def test_take_and_drop_reassemble_the_sequence():
    items = [1, 2, 3, 4, 5]
    for n in range(0, len(items)):
        rejoined = concat(take(n, items), lambda: drop(n, items))
        assert to_list(rejoined) == items


def test_split_at():
    assert to_lists(split_at(3, [1, 2, 3, 4, 5, 6])) == ([1, 2, 3], [4, 5, 6])


def test_take_while():
    assert to_list(take_while(lambda x: x <= 3, [1, 2, 3, 4, 5, 6])) == [1, 2, 3]
    assert to_list(take_while(lambda x: x < 0, [1, 2])) == []
    assert to_list(take_while(lambda x: x < 4, range(1))) == [1, 2, 3]


def test_drop_while():
    assert to_list(drop_while(lambda x: x > 3, [6, 5, 4, 3, 2, 1])) == [3, 2, 1]
    assert to_list(drop_while(lambda x: x > 0, [6, 5])) == []


def test_span():
    assert to_lists(span(lambda x: x < 3, [1, 2, 3, 4, 5])) == ([1, 2], [3, 4, 5])


def test_break():
    assert to_lists(break_(lambda x: x == 3, [1, 2, 3, 4, 5])) == ([1, 2], [3, 4, 5])


def test_init():
    assert to_list(init([1, 2, 3, 4])) == [1, 2, 3]
    assert to_list(init([1])) == []


def test_init_infinite():
    assert to_list(take(3, init(range(1)))) == [1, 2, 3]


def test_init_of_empty_sequence_raises():
    with raises(EmptySequenceError):
        init([])


def test_last():
    assert last([1, 2, 3]) == 3
    assert last('x') == 'x'


def test_last_of_empty_sequence_raises():
    with raises(EmptySequenceError) as e_info:
        last(NIL)
    assert e_info.value.operation == 'last'


def test_split_at_iterator():
    assert to_lists(split_at(2, iter([1, 2, 3, 4]))) == ([1, 2], [3, 4])
    assert to_lists(split_at(0, iter([1, 2]))) == ([], [1, 2])
    assert to_lists(split_at(5, iter([1, 2]))) == ([1, 2], [])
