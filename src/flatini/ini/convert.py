# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/10/19 15:02:40
# @Author : Kariko Lin

"""Typed value <-> INI text conversions.

Each supported type gets one `StringCodec`. `read()` and `write()`
of `ConfigFile` resolve codecs by type through `get_codec()`;
extra types can be plugged in with `register_codec()`.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Generic, NamedTuple, TypeVar

T = TypeVar('T')


class InvalidValueError(ValueError):
    """Stored text can't be parsed into the requested type."""
    pass


class Char(str):
    """Marker type for reading a single character.

    `ConfigFile.read(g, k, Char)` returns the first character
    of the stored text, or `' '` if missing or empty.
    """
    pass


class StringCodec(NamedTuple, Generic[T]):
    to_text: Callable[[T], str]
    from_text: Callable[[str], T]
    default: T  # what a missing key reads as


def _numeric(kind: Callable[[str], T]) -> Callable[[str], T]:
    def parse(text: str) -> T:
        try:
            return kind(text)
        except (ValueError, InvalidOperation) as e:
            raise InvalidValueError(
                f'"{text}" is not a valid {kind.__name__}.') from e
    return parse


_CODECS: dict[type, StringCodec[Any]] = {
    str: StringCodec(str, str, ''),
    # empty text has no first char, fall back to the blank.
    Char: StringCodec(str, lambda x: Char(x[0] if x else ' '), Char(' ')),
    # only exact '1' reads as True.
    bool: StringCodec(lambda x: '1' if x else '0', lambda x: x == '1', False),
    int: StringCodec(str, _numeric(int), 0),
    float: StringCodec(str, _numeric(float), 0.0),
    Decimal: StringCodec(str, _numeric(Decimal), Decimal(0)),
}


def register_codec(kind: type[T], codec: StringCodec[T]) -> None:
    """Plug in (or override) conversions for `kind`."""
    _CODECS[kind] = codec


def get_codec(kind: type[T]) -> StringCodec[T]:
    """Codec of `kind`, or of its nearest registered base class.

    So `IntEnum` members go through `int`, while `bool` and `Char`
    keep their own codecs.
    """
    for i in kind.__mro__:
        if i in _CODECS:
            return _CODECS[i]
    raise TypeError(f'No INI text conversion registered for {kind!r}.')


def to_text(value: object) -> str:
    """Canonical text form of `value`, looked up by its type."""
    return get_codec(type(value)).to_text(value)
