# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 14:26:03
# @Author : Kariko Lin

"""Note: the format handled here is a *flat* INI dialect.

    ```ini
    loose=pair      ; belongs to group '' (and this is NOT a comment)

    [GroupName]
    key1=value1
    key2=value2

    [OtherGroup]
    key3=value3
    ```

No comments, no escaping, no whitespace trimming, no multi-line values.
Whatever follows the first `=` is the value, verbatim.
"""

import logging
from collections.abc import Iterable
from io import StringIO, TextIOBase
from locale import getpreferredencoding
from warnings import warn

import chardet

from ..abstract import FileHandler
from ..consts import ConfigStatus
from .model import Record, RecordStore


class IniParser(FileHandler[RecordStore]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        case_insensitive: bool = False
    ) -> None:
        super().__init__(filename, encoding)
        self._fold_case = case_insensitive

    @property
    def encoding(self) -> str | None:
        """Encoding used for the next write.

        Updated after a read had to guess the file encoding."""
        return self._codec

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: RecordStore | None = None
    ) -> RecordStore:
        """Read a decoded text stream into records.

        May raise `OSError` (or `UnicodeDecodeError`) from the stream;
        `self.read()` turns those into a status.
        """
        if ins is None:
            ins = RecordStore()
        group = ''
        while i := buf.readline():
            line = i.removesuffix('\n').removesuffix('\r')
            # empty lines can't be indexed, skip before checking brackets.
            if not line:
                continue
            if line[0] == '[' and line[-1] == ']':
                group = line
                continue
            key, _, val = line.partition('=')
            if key or val:
                ins.append(Record(group, key, val))
        return ins

    @staticmethod
    def writestream(records: Iterable[Record], buf: TextIOBase) -> None:
        """Write records as flat INI text, with no trailing newline.

        A group header is emitted whenever the group changes, so
        non-contiguous groups come out with repeated headers.
        """
        current, seen = '', set()
        for idx, rec in enumerate(records):
            if idx:
                buf.write('\n')
            if rec.group != current:
                if idx:
                    buf.write('\n')
                if rec.group in seen:
                    warn(f'Group "{rec.group}" is not contiguous, '
                         'its header is written once more.')
                buf.write(f'{rec.group}\n')
                current = rec.group
            seen.add(rec.group)
            buf.write(f'{rec.key}={rec.value}')

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if not codec['encoding'] or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            # also when chardet names a codec Python lacks.
            codec = {'encoding': 'gbk'}
            buf = raw.decode('gbk')
        # keep it for writing back.
        self._codec = codec['encoding']
        logging.info(f'Decoded "{self._fn}" as {self._codec}.')
        return StringIO(buf)

    def read(self) -> tuple[RecordStore, ConfigStatus]:
        """Read the file bound to this parser.

        Records parsed before a read failure are kept.
        """
        ret = RecordStore(case_insensitive=self._fold_case)
        try:
            # when encoding is None, `open()` would fallback to system default.
            fp = open(self._fn, 'r', encoding=self._codec)
        except OSError as e:
            logging.warning(f'Failed to open "{self._fn}":\n  {e}')
            return ret, ConfigStatus.Failed_To_Open

        try:
            with fp:
                self.readstream(fp, ret)
        except UnicodeDecodeError:
            # wrong codec, let `chardet` guess.
            ret.clear()
            try:
                self.readstream(self._decode_file(), ret)
            except (OSError, UnicodeDecodeError) as e:
                logging.warning(f'Failed to read "{self._fn}":\n  {e}')
                return ret, ConfigStatus.Failed_To_Input
        except OSError as e:
            logging.warning(f'Failed to read "{self._fn}":\n  {e}')
            return ret, ConfigStatus.Failed_To_Input
        logging.debug(f'Read {len(ret)} records from "{self._fn}".')
        return ret, ConfigStatus.Success

    def write(self, instance: Iterable[Record]) -> ConfigStatus:
        """Save records to the file bound to this parser (truncating it).

        Text that the encoding can't represent fails with
        `Failed_To_Output` before the file gets touched.
        """
        buf = StringIO()
        self.writestream(instance, buf)
        # same fallback as `open()` when encoding is None.
        codec = self._codec or getpreferredencoding(False)
        try:
            buf.getvalue().encode(codec)
        except (UnicodeEncodeError, LookupError) as e:
            logging.warning(f'Failed to encode "{self._fn}" as {codec}:\n  {e}')
            return ConfigStatus.Failed_To_Output

        try:
            fp = open(self._fn, 'w', encoding=codec)
        except OSError as e:
            logging.warning(f'Failed to open "{self._fn}" for writing:\n  {e}')
            return ConfigStatus.Failed_To_Open

        try:
            with fp:
                fp.write(buf.getvalue())
        except OSError as e:
            logging.warning(f'Failed to write "{self._fn}":\n  {e}')
            return ConfigStatus.Failed_To_Output
        logging.debug(f'Saved to "{self._fn}".')
        return ConfigStatus.Success

    def __str__(self) -> str:
        return "Flat INI: " + super().__str__() + f"({self._codec})"
