# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 02:58:44

from .consts import MAX_LINE_LENGTH, NONAME, LineKind
from .model import (
    IniError,
    IniItem,
    IniSection,
    IniStore,
    NotParsed,
    SectionNotFound
)
from .options import IniOptions
from .parser import (
    DuplicateSection,
    IniParseError,
    IniParser,
    ItemOutsideSection
)
from .reader import IniReader, IniSectionProxy
from .writer import dumps
