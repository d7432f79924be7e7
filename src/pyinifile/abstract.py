# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/12 21:40:08
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from io import TextIOBase
from os import PathLike, fspath
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Read-only file source. Writing is not supported on purpose."""

    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = fspath(filename)

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @staticmethod
    @abstractmethod
    def readstream(buf: TextIOBase) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
