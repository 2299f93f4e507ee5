"""
Lazy sequence prelude.

Everything in one namespace:

    from prelude import *

    primes = filter(is_prime, range(2))
    to_list(take(5, primes))
"""

from combinators import (concat, concat_map, filter, intercalate, intersperse, map, parallel_map,
                         unzip, zip, zip_with)
from files import read_file, read_stream, use
from folds import foldl, foldl1, foldr, foldr1, reverse, scanl, scanl1, scanr, scanr1
from functions import compose, flip, fst, identity, snd
from generators import cycle, iterate, range, repeat
from materialize import all, any, consume, elem, length, not_elem, sort, to_list, to_lists
from sequence import NIL, EmptySequenceError, Sequence, as_sequence, cons, defer, empty, first, null, rest, suspend
from slicing import break_, drop, drop_while, init, last, span, split_at, take, take_while
from text import lines, unlines, unwords, words

__all__ = [
    # Sequence primitive
    "Sequence", "EmptySequenceError", "NIL", "null", "cons", "defer", "suspend", "as_sequence",
    "empty", "first", "rest",
    # Structural combinators
    "map", "parallel_map", "filter", "concat", "concat_map", "zip_with", "zip", "unzip",
    "intersperse", "intercalate",
    # Folds and scans
    "foldl", "foldr", "foldl1", "foldr1", "scanl", "scanl1", "scanr", "scanr1", "reverse",
    # Windowing and slicing
    "take", "drop", "take_while", "drop_while", "span", "break_", "split_at", "init", "last",
    # Generators
    "iterate", "repeat", "cycle", "range",
    # Materialization
    "to_list", "to_lists", "sort", "length", "any", "all", "elem", "not_elem", "consume",
    # Functions
    "identity", "compose", "flip", "fst", "snd",
    # Input and text
    "read_file", "read_stream", "use", "lines", "unlines", "words", "unwords",
]
