"""
Lazy character input.

The file is opened when the first character is queried and closed when the
last one has been read. A sequence abandoned half way closes its file when
the underlying generator is garbage collected.
"""

import logging

from sequence import from_iterator

logger = logging.getLogger(__name__)


def _characters(stream, name):
    with stream:
        while True:
            char = stream.read(1)
            if not char:
                break
            yield char
    logger.debug('closed %s', name)


def _file_characters(path, encoding):
    logger.debug('opening %s', path)
    yield from _characters(open(path, encoding=encoding), path)


def read_stream(stream):
    """Lazy sequence of the characters of an open text stream, which is
    closed at end of input.
    """
    return from_iterator(_characters(stream, getattr(stream, 'name', repr(stream))))


def read_file(path, encoding='utf-8'):
    return from_iterator(_file_characters(path, encoding))


def use(resource, func):
    """Call func with resource, closing the resource afterward."""
    with resource:
        return func(resource)
