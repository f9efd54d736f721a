# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 03:02:10

import logging

# `ini` goes first, its reader pulls `formats` in.
from .ini import (
    NONAME,
    DuplicateSection,
    IniError,
    IniItem,
    IniOptions,
    IniParseError,
    IniReader,
    IniSection,
    IniSectionProxy,
    IniStore,
    ItemOutsideSection,
    NotParsed,
    SectionNotFound
)
from .formats import IniFileHandler, IniYamlHandler, InvalidYamlDocument

__all__ = [
    'IniReader', 'IniSectionProxy', 'IniOptions',
    'IniStore', 'IniSection', 'IniItem', 'NONAME',
    'IniError', 'IniParseError', 'ItemOutsideSection', 'DuplicateSection',
    'SectionNotFound', 'NotParsed',
    'IniFileHandler', 'IniYamlHandler', 'InvalidYamlDocument'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
