# -*- encoding: utf-8 -*-
# @File   : writer.py
# @Time   : 2024/10/13 00:21:37

"""`IniStore` back to text.

Comments and blank lines are lost, and `{NONAME}` lines are written
bare, right where they sit among the items of their section.
"""

from .consts import NONAME
from .model import IniSection, IniStore


def section2str(name: str, section: IniSection) -> str:
    ret = f'[{name}]\n'
    for k, v in section:
        if k != NONAME:
            ret += f'{k} = '
        ret += f'{v}\n'
    return ret


def dumps(store: IniStore) -> str:
    return ''.join(
        section2str(name, data) + '\n'
        for name, data in store.items()
    )
