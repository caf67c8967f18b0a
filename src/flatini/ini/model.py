# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 14:11:48
# @Author : Kariko Lin

"""
Flat INI structure: an ordered list of `(group, key, value)` records.

Groups are kept as the literal header line, brackets included,
so a record read before any header belongs to group `''`.
"""

from collections.abc import MutableSequence
from typing import Iterator, NamedTuple, overload


class Record(NamedTuple):
    group: str  # e.g. '[Graphics]'
    key: str
    value: str


class RecordStore(MutableSequence[Record]):
    """Ordered records of one INI file.

    Insertion order is write-back order. Plain insertion never
    deduplicates; use `put()` for first-write-wins or update semantics.

    With `case_insensitive=True`, group and key (never value) are
    lower-cased on the way in and on lookup.
    """
    def __init__(
        self, records: list[Record] | None = None, *,
        case_insensitive: bool = False
    ) -> None:
        self.__records: list[Record] = []
        self._fold_case = case_insensitive
        if records:
            self.extend(records)

    @property
    def case_insensitive(self) -> bool:
        return self._fold_case

    def fold(self, text: str) -> str:
        return text.lower() if self._fold_case else text

    def _normalize(self, record: Record) -> Record:
        if not self._fold_case:
            return record
        return record._replace(
            group=record.group.lower(), key=record.key.lower())

    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> list[Record]: ...

    def __getitem__(self, index):
        return self.__records[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self.__records[index] = [self._normalize(Record(*i))
                                     for i in value]
        else:
            self.__records[index] = self._normalize(Record(*value))

    def __delitem__(self, index: int | slice) -> None:
        del self.__records[index]

    def __len__(self) -> int:
        return len(self.__records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.__records)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RecordStore):
            return self.__records == other.__records
        if isinstance(other, list):
            return self.__records == other
        return NotImplemented

    def __repr__(self) -> str:
        return f'RecordStore({self.__records!r})'

    def insert(self, index: int, value: Record) -> None:
        self.__records.insert(index, self._normalize(Record(*value)))

    def find(self, group: str, key: str) -> int | None:
        """Index of the first record matching `group` and `key` exactly.

        `group` is the stored header form, brackets included.
        Returns `None` if nothing matches.
        """
        group, key = self.fold(group), self.fold(key)
        for idx, rec in enumerate(self.__records):
            if rec.group == group and rec.key == key:
                return idx
        return None

    def put(
        self, group: str, key: str, value: str, update: bool = False
    ) -> None:
        """Append a new record, or overwrite the value in place
        when one exists and `update` is set. Otherwise a no-op."""
        idx = self.find(group, key)
        if idx is None:
            self.append(Record(group, key, value))
        elif update:
            self.__records[idx] = self.__records[idx]._replace(value=value)

    def discard(self, group: str, key: str) -> bool:
        """Remove the first matching record. Returns whether it existed."""
        idx = self.find(group, key)
        if idx is None:
            return False
        del self.__records[idx]
        return True

