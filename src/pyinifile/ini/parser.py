# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 23:05:42
# @Author : Kariko Lin

"""Turns raw lines into typed tables.

The accepted format is deliberately loose:

    ```ini
    [PLAYER_DATA]
    ; comments only when `;` is the very first char
    name = Hero        ; inline comments are NOT supported, kept in value
    score = 100
    positionX = 12.5
    visited = TRUE
    ```

Values become `int`, `float`, `bool` or `str`, tried in that order.

Any line holding a `[`, or ending with `]`, is taken as a section header,
even `motd = [welcome]`. Some INIs in the wild rely on that.
"""

import logging
from typing import Iterable

from .errors import IntegerTooLongError, MissingEqualsError, NoSectionError
from .model import IniTables, IniValue, ValueKind

# C escapes \a \b \f \n \r \t \v \\ \' \" \?
ESCAPE_CHARS = '\a\b\f\n\r\t\v\\\'"?'
_ESCAPE_TABLE = str.maketrans('', '', ESCAPE_CHARS)
_ASCII_DIGITS = frozenset('0123456789')


def remove_escapes(line: str) -> str:
    return line.translate(_ESCAPE_TABLE)


def remove_blanks(text: str) -> str:
    """"a b C" -> "abC"."""
    return ''.join(text.split())


def is_header(line: str) -> bool:
    return '[' in line or line[-1] == ']'


def section_name(line: str) -> str:
    """Cut the name out of `[name]`.

    Trusts the header to be well formed: takes `len - 2` chars right after
    the first `[` (or from the start when there is none).
    """
    line = remove_blanks(line)
    start = line.find('[') + 1
    return line[start:start + len(line) - 2]


def is_int(value: str) -> bool:
    return bool(value) and all(c in _ASCII_DIGITS for c in value)


def is_double(value: str) -> bool:
    # 1.123.abc
    if value.count('.') != 1:
        return False
    # 123.
    if value[-1] == '.':
        return False
    return all(c in _ASCII_DIGITS for c in value if c != '.')


def is_bool(value: str) -> bool:
    return value.lower() in ('true', 'false')


def classify(value: str) -> tuple[ValueKind, IniValue]:
    """Pick the first matching type, in order int, double, bool, string."""
    if is_int(value):
        # ValueError past sys.get_int_max_str_digits().
        return ValueKind.INT, int(value)
    if is_double(value):
        # overlong mantissas round, huge ones become inf. never raises.
        return ValueKind.DOUBLE, float(value)
    if is_bool(value):
        return ValueKind.BOOL, value.lower() == 'true'
    return ValueKind.STRING, value


def split_pair(line: str) -> tuple[str, str]:
    """`a b = data` -> (`ab`, `data`). Trailing blanks of data are kept."""
    key, value = line.split('=', 1)
    return remove_blanks(key), value.lstrip()


def parse_lines(lines: Iterable[str]) -> IniTables:
    """Parse raw lines (as the loader gives them) into fresh tables.

    All or nothing: on `NoSectionError` or `MissingEqualsError` the
    half-built tables are thrown away with the exception.
    """
    ret = IniTables()
    section = ''
    for lineno, raw in enumerate(lines, 1):
        line = remove_escapes(raw)
        # e.g. a lone tab, blank once escapes are gone.
        if not line:
            continue

        if is_header(line):
            section = section_name(line)
            logging.debug(f'line {lineno}: entering [{section}]')
            continue

        if not section:
            logging.warning(f'line {lineno}: data before any section')
            raise NoSectionError(lineno, raw)

        if '=' not in line:
            logging.warning(f"line {lineno}: no '=' in {raw!r}")
            raise MissingEqualsError(lineno, raw)

        key, value = split_pair(line)
        try:
            kind, typed = classify(value)
        except ValueError as e:
            logging.warning(f'line {lineno}: {len(value)} digits, too long for int')
            raise IntegerTooLongError(lineno, raw) from e
        if (previous := ret.store(kind, section, key, typed)) is not None:
            logging.debug(
                f'line {lineno}: [{section}] {key} overrides '
                f'the {previous.value} value before')
    return ret
