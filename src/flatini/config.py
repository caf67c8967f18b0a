# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2026/10/19 15:31:16
# @Author : Kariko Lin

import logging
from os import PathLike, fspath, getcwd
from os.path import exists, join
from typing import TypeVar

from .consts import DEFAULT_FILE_NAME, ConfigStatus
from .ini import (
    IniParser,
    InvalidValueError,
    Record,
    RecordStore,
    get_codec,
    to_text
)

T = TypeVar('T')


class ConfigFile:
    """Typed access to one flat INI file.

        ```python
        cfg = ConfigFile('settings.ini')
        cfg.write('Graphics', 'width', 1920)
        cfg.read('Graphics', 'width', int)  # 1920
        cfg.save()
        ```

    Groups are given bare (`'Graphics'`) and stored as headers
    (`'[Graphics]'`). A missing key is not an error: `read()` returns
    the type's zero value (`''`, `0`, `0.0`, `False`, `' '` for `Char`).

    I/O failures never raise. `save()` returns a `ConfigStatus`,
    and the latest one (including the initial load) stays in `self.error`
    until the next I/O or `self.clear()`.
    """
    def __init__(
        self, path: str | PathLike[str] | None = None, *,
        case_insensitive: bool = False,
        encoding: str | None = None
    ) -> None:
        self._path = (join(getcwd(), DEFAULT_FILE_NAME)
                      if path is None else fspath(path))
        self._parser = IniParser(
            self._path, encoding, case_insensitive=case_insensitive)
        if exists(self._path):
            self._data, self._error = self._parser.read()
        else:
            logging.info(f'"{self._path}" not found, starting empty.')
            self._data = RecordStore(case_insensitive=case_insensitive)
            self._error = ConfigStatus.Path_Not_Found

    @staticmethod
    def _header(group: str) -> str:
        return f'[{group}]'

    @property
    def path(self) -> str:
        return self._path

    @property
    def error(self) -> ConfigStatus:
        """Status of the latest load or save."""
        return self._error

    @property
    def records(self) -> list[Record]:
        """Snapshot of all records, in file order."""
        return list(self._data)

    def find(self, group: str, key: str) -> int | None:
        """Index of the first record under `[group]` named `key`,
        or `None`."""
        return self._data.find(self._header(group), key)

    def write(
        self, group: str, key: str, value: object,
        update_if_present: bool = False
    ) -> None:
        """Add `key` under `[group]`.

        If the key already exists, its value is only replaced when
        `update_if_present` is set. Otherwise the first write wins.
        """
        self._data.put(
            self._header(group), key, to_text(value), update_if_present)

    def read(self, group: str, key: str, kind: type[T] = str) -> T:
        """Read `key` under `[group]` as `kind`.

        Raises:
            InvalidValueError: stored text isn't a valid `kind`.
            TypeError: no conversion registered for `kind`.
        """
        codec = get_codec(kind)
        idx = self.find(group, key)
        if idx is None:
            return codec.default
        try:
            return codec.from_text(self._data[idx].value)
        except InvalidValueError as e:
            raise InvalidValueError(f'[{group}] {key}: {e}') from e

    def read_into(
        self, target: object, attr: str,
        group: str, key: str, kind: type = str
    ) -> None:
        """Same as `read()`, but assigns the result to `target.attr`."""
        setattr(target, attr, self.read(group, key, kind))

    def remove(self, group: str, key: str) -> None:
        self._data.discard(self._header(group), key)

    def save(self) -> ConfigStatus:
        """Write all records back to `self.path`, replacing its content."""
        self._error = self._parser.write(self._data)
        return self._error

    def clear(self) -> None:
        """Reset `self.error` to `Success`.

        Note: records in memory are kept.
        """
        self._error = ConfigStatus.Success

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        return self.find(*item) is not None

    def __str__(self) -> str:
        return str(self._parser)

    def __repr__(self) -> str:
        return '<ConfigFile "%s" { .cnt = %d }>' % (self._path, len(self))
