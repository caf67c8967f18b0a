# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 14:00:52
# @Author : Kariko Lin

import logging

from .config import ConfigFile
from .consts import ConfigStatus
from .ini import (
    Char,
    IniParser,
    InvalidValueError,
    Record,
    RecordStore,
    StringCodec,
    register_codec
)

__all__ = [
    'ConfigFile', 'ConfigStatus',
    'IniParser', 'Record', 'RecordStore',
    'Char', 'StringCodec', 'InvalidValueError', 'register_codec'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
