# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:52:30
# @Author : Kariko Lin

from .errors import (
    IniError,
    IniLoadError,
    CannotOpenFile,
    FileNotLoaded,
    IniParseError,
    NoSectionError,
    MissingEqualsError,
    IntegerTooLongError,
    IniLookupError,
    SectionNotFound,
    KeyNotFound
)
from .model import IniTables, Lookup, ValueKind
from .loader import IniLoader
from .parser import parse_lines
from .inifile import IniFile
