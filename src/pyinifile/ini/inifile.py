# -*- encoding: utf-8 -*-
# @File   : inifile.py
# @Time   : 2024/10/13 00:12:09
# @Author : Kariko Lin

from os import PathLike
from typing import Self, cast

from .errors import FileNotLoaded
from .loader import DEFAULT_CONFIDENCE, IniLoader
from .model import IniTables, IniValue, Lookup, ValueKind
from .parser import parse_lines


class IniFile:
    """One INI file: load it, parse it, then ask for typed values.

        ```python
        ini = IniFile()
        ini.load_from_file('SampleFile.ini')
        ini.parse()
        ini.get_int('PLAYER_DATA', 'score')  # 100
        ```

    Getters raise `SectionNotFound` / `KeyNotFound` on a miss;
    `lookup()` hands back the type default along with the error instead.
    A value typed `true` can only be read by `get_bool()`, and so on.
    """

    def __init__(
        self, encoding: str | None = None, *,
        confidence: float = DEFAULT_CONFIDENCE
    ) -> None:
        self._codec = encoding
        self._confidence = confidence
        self.__loaded = False
        self.__parsed = False
        self.__raw: list[str] = []
        self.__tables = IniTables()

    @classmethod
    def open(
        cls, path: str | PathLike[str],
        encoding: str | None = None, **kwargs
    ) -> Self:
        """Load and parse `path` in one go."""
        ret = cls(encoding, **kwargs)
        ret.load_from_file(path)
        ret.parse()
        return ret

    @property
    def is_loaded(self) -> bool:
        return self.__loaded

    @property
    def is_parsed(self) -> bool:
        return self.__parsed

    @property
    def tables(self) -> IniTables:
        return self.__tables

    def load_from_file(self, path: str | PathLike[str]) -> None:
        """Replace the raw line buffer with the lines of `path`.

        Previously parsed tables stay until the next `parse()`.
        """
        loader = IniLoader(path, self._codec, confidence=self._confidence)
        self.__loaded = False
        self.__raw = []
        self.__raw = loader.read()
        self.__loaded = True

    def parse(self) -> None:
        """Rebuild the typed tables from the loaded lines.

        On failure the tables are left empty, never half filled.
        """
        self.__parsed = False
        self.__tables.clear()
        if not self.__loaded:
            raise FileNotLoaded()
        self.__tables = parse_lines(self.__raw)
        self.__parsed = True

    def clear(self) -> None:
        self.__loaded = False
        self.__parsed = False
        self.__raw.clear()
        self.__tables.clear()

    def lookup(self, section: str, key: str, kind: ValueKind) -> Lookup:
        return self.__tables.find(ValueKind(kind), section, key)

    def __get(self, kind: ValueKind, section: str, key: str) -> IniValue:
        value, error = self.lookup(section, key, kind)
        if error is not None:
            raise error
        return value

    def get_string(self, section: str, key: str) -> str:
        return cast(str, self.__get(ValueKind.STRING, section, key))

    def get_int(self, section: str, key: str) -> int:
        return cast(int, self.__get(ValueKind.INT, section, key))

    def get_double(self, section: str, key: str) -> float:
        return cast(float, self.__get(ValueKind.DOUBLE, section, key))

    def get_bool(self, section: str, key: str) -> bool:
        return cast(bool, self.__get(ValueKind.BOOL, section, key))

    def sections(self) -> list[str]:
        return self.__tables.sections()

    def to_dict(self) -> dict[str, dict[str, IniValue]]:
        return self.__tables.to_dict()

    def __repr__(self) -> str:
        return '<IniFile loaded=%s parsed=%s lines=%d %r>' % (
            self.__loaded, self.__parsed, len(self.__raw), self.__tables)
