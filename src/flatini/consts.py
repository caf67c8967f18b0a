# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 14:05:37
# @Author : Kariko Lin

from enum import Enum


class ConfigStatus(int, Enum):
    Success = 0
    Failed_To_Open = 1     # source/sink could not be opened
    Failed_To_Output = 2   # write broke partway
    Failed_To_Input = 3    # read broke partway
    Path_Not_Found = 4     # never tried to open


DEFAULT_FILE_NAME = 'FileConfig.ini'
