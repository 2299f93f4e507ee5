from combinators import concat_map, intercalate
from sequence import FiniteSequence


def lines(s):
    return FiniteSequence(s.split('\n'))


def unlines(seq):
    """Characters of the strings in seq, each followed by a newline."""
    return concat_map(lambda line: line + '\n', seq)


def words(s):
    return FiniteSequence(s.split())


def unwords(seq):
    return intercalate(' ', seq)
