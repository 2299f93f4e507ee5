def identity(x):
    return x


def compose(outer, inner):
    """function applying inner, then outer"""
    return lambda *args, **kwargs: outer(inner(*args, **kwargs))


def flip(func):
    """function taking the first two arguments of func in reverse order"""
    return lambda x, y: func(y, x)


def fst(pair):
    return pair[0]


def snd(pair):
    return pair[1]
