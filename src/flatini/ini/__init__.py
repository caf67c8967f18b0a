# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 14:09:20
# @Author : Kariko Lin

from .model import Record, RecordStore
from .parser import IniParser
from .convert import (
    Char,
    InvalidValueError,
    StringCodec,
    get_codec,
    register_codec,
    to_text
)
