# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/19 14:02:11
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

from .consts import ConfigStatus

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Binds a document type to one file on disk.

    Unlike a plain reader, both directions report a `ConfigStatus`
    instead of raising on I/O failures.
    """
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @abstractmethod
    def read(self) -> tuple[T, ConfigStatus]:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> ConfigStatus:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
