# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 22:03:51
# @Author : Kariko Lin

"""Exceptions raised while loading, parsing and querying INI files.

Every message keeps the wording the reader always printed, e.g.
`Cannot find int in section PLAYER_DATA (score)`.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import ValueKind


class IniError(Exception):
    """Root of all `pyinifile` errors."""
    pass


class IniLoadError(IniError):
    pass


class CannotOpenFile(IniLoadError):
    def __init__(self, path: str) -> None:
        super().__init__(f'Cannot open file ({path})')
        self.path = path


class FileNotLoaded(IniLoadError):
    def __init__(self) -> None:
        super().__init__('No file loaded, call load_from_file() first')


class IniParseError(IniError):
    """`lineno` counts the raw lines kept by the loader, from 1."""
    reason = 'Parse error'

    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(f'{self.reason} (line {lineno}: {line!r})')
        self.lineno = lineno
        self.line = line


class NoSectionError(IniParseError):
    reason = 'No section name'


class MissingEqualsError(IniParseError):
    reason = "No '=' in data line"


class IniLookupError(IniError, LookupError):
    def __init__(
        self, message: str,
        kind: 'ValueKind', section: str, key: str
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.section = section
        self.key = key

    @property
    def default(self) -> object:
        """What the getter falls back to on this miss."""
        return self.kind.default


class SectionNotFound(IniLookupError):
    def __init__(self, kind: 'ValueKind', section: str, key: str) -> None:
        super().__init__(
            f'Cannot find {kind.value} section name ({section})',
            kind, section, key)


class KeyNotFound(IniLookupError):
    def __init__(self, kind: 'ValueKind', section: str, key: str) -> None:
        super().__init__(
            f'Cannot find {kind.value} in section {section} ({key})',
            kind, section, key)


class IntegerTooLongError(IniParseError):
    reason = 'Integer value has too many digits'
