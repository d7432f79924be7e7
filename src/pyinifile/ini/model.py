# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:31:17
# @Author : Kariko Lin

"""
Typed INI tables.

Each value lives in exactly one of four tables, picked by its classified
type. Asking for a value through the wrong type is just a miss.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Iterator, NamedTuple

from .errors import IniLookupError, KeyNotFound, SectionNotFound

IniValue = str | int | float | bool


class ValueKind(str, Enum):
    STRING = 'string'
    INT = 'int'
    DOUBLE = 'double'
    BOOL = 'bool'

    @property
    def default(self) -> IniValue:
        return _DEFAULTS[self]


_DEFAULTS: dict[ValueKind, IniValue] = {
    ValueKind.STRING: '',
    ValueKind.INT: 0,
    ValueKind.DOUBLE: 0.0,
    ValueKind.BOOL: False,
}


class Lookup(NamedTuple):
    """Result of a non-raising lookup.

    On a miss `value` holds the type default and `error` tells why.
    """
    value: IniValue
    error: IniLookupError | None = None

    @property
    def found(self) -> bool:
        return self.error is None


class IniTables(Mapping[ValueKind, Mapping[str, Mapping[str, IniValue]]]):
    """四张类型表：`{kind: {section: {key: value}}}`。

    对外只读；写入仅经由`store()`，由解析器调用。
    """

    def __init__(self) -> None:
        self.__tables: dict[ValueKind, dict[str, dict[str, IniValue]]] = {
            kind: {} for kind in ValueKind
        }
        # first-seen order of sections and their keys, for exporting.
        self.__order: dict[str, dict[str, None]] = {}

    def __getitem__(self, kind: ValueKind) -> Mapping[str, Mapping[str, IniValue]]:
        return self.__tables[kind]

    def __iter__(self) -> Iterator[ValueKind]:
        return iter(self.__tables)

    def __len__(self) -> int:
        return len(self.__tables)

    def store(
        self, kind: ValueKind, section: str, key: str, value: IniValue
    ) -> ValueKind | None:
        """Put `value` under `(section, key)` in the `kind` table.

        Returns the kind the key was previously stored as, if any.
        The key is dropped from that table so it lives in one table only.
        """
        previous = None
        for other, table in self.__tables.items():
            if key in table.get(section, {}):
                previous = other
                if other is not kind:
                    del table[section][key]
                    if not table[section]:
                        del table[section]
        self.__order.setdefault(section, {}).setdefault(key, None)
        self.__tables[kind].setdefault(section, {})[key] = value
        return previous

    def find(self, kind: ValueKind, section: str, key: str) -> Lookup:
        table = self.__tables[kind]
        if section not in table:
            return Lookup(kind.default, SectionNotFound(kind, section, key))
        if key not in table[section]:
            return Lookup(kind.default, KeyNotFound(kind, section, key))
        return Lookup(table[section][key])

    def sections(self) -> list[str]:
        # keys are moved between tables, never dropped
        return list(self.__order)

    def to_dict(self) -> dict[str, dict[str, IniValue]]:
        """Merge the four tables into `{section: {key: value}}`.

        Sections and keys come out in the order they were first stored.
        """
        merged: dict[str, dict[str, IniValue]] = {}
        for table in self.__tables.values():
            for section, pairs in table.items():
                merged.setdefault(section, {}).update(pairs)
        return {
            section: {key: merged[section][key] for key in keys}
            for section, keys in self.__order.items()
        }

    def clear(self) -> None:
        for table in self.__tables.values():
            table.clear()
        self.__order.clear()

    def is_empty(self) -> bool:
        return not any(self.__tables.values())

    def __repr__(self) -> str:
        return 'IniTables { %s }' % ', '.join(
            f'.{kind.value} = {len(table)}'
            for kind, table in self.__tables.items())
