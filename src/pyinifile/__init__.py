# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:35:12
# @Author : Kariko Lin

import logging

from .ini import (
    IniFile, IniLoader, IniTables, Lookup, ValueKind, parse_lines,
    IniError, IniLoadError, CannotOpenFile, FileNotLoaded,
    IniParseError, NoSectionError, MissingEqualsError, IntegerTooLongError,
    IniLookupError, SectionNotFound, KeyNotFound
)
from .export import dump_yaml

__all__ = [
    'IniFile', 'IniLoader', 'IniTables', 'Lookup', 'ValueKind', 'parse_lines',
    'IniError', 'IniLoadError', 'CannotOpenFile', 'FileNotLoaded',
    'IniParseError', 'NoSectionError', 'MissingEqualsError',
    'IntegerTooLongError',
    'IniLookupError', 'SectionNotFound', 'KeyNotFound',
    'dump_yaml'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
