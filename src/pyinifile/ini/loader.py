# -*- encoding: utf-8 -*-
# @File   : loader.py
# @Time   : 2024/10/12 22:10:36
# @Author : Kariko Lin

"""Reads raw lines out of an INI file.

Only blank lines and `;` comments are dropped here. Everything else,
spacing included, is left to the parser.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from ..abstract import FileHandler
from .errors import CannotOpenFile

DEFAULT_CONFIDENCE = 0.8
FALLBACK_CODECS = ('utf-8', 'gbk')
COMMENT_MARK = ';'


class IniLoader(FileHandler[list[str]]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        confidence: float = DEFAULT_CONFIDENCE
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._confidence = confidence

    @staticmethod
    def readstream(buf: TextIOBase) -> list[str]:
        """读取解码好的字符串流，丢弃空行与注释行。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        ret: list[str] = []
        for i in buf:
            i = i.removesuffix('\n')
            # no lstrip here, `  ;foo` is NOT a comment.
            if not i or i[0] == COMMENT_MARK:
                continue
            ret.append(i)
        return ret

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (
            codec is None
            or codec['encoding'] is None
            or codec['confidence'] < self._confidence
        ):
            codec = {'encoding': FALLBACK_CODECS[0]}
        logging.warning(
            f'{self._fn} is not {self._codec or "locale"} encoded, '
            f'retrying as {codec["encoding"]}')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode(FALLBACK_CODECS[-1], errors='replace')
        # split on \n only, a lone \r stays in the line like with open()
        return StringIO(buf, newline='\n')

    def read(self) -> list[str]:
        """Read the file this loader points at.

        Raises `CannotOpenFile` if it is missing or unreadable.
        """
        try:
            try:
                # when encoding is None, `open()` would fallback to system
                # default, and a wrong guess falls back to `chardet`.
                # no newline translation: `\r` is dropped by the parser.
                with open(
                    self._fn, 'r', encoding=self._codec, newline='\n'
                ) as fp:
                    ret = self.readstream(fp)
            except UnicodeDecodeError:
                ret = self.readstream(self._decode_file())
        except OSError as e:
            logging.debug(f'open {self._fn} failed: {e}')
            raise CannotOpenFile(self._fn) from e
        logging.debug(f'{len(ret)} raw lines loaded from {self._fn}')
        return ret

    def __str__(self) -> str:
        return "INI source: " + super().__str__() + f" ({self._codec})"
