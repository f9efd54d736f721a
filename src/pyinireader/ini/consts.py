# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:40:18

from enum import Enum


# longer lines are dropped as if they were comments.
MAX_LINE_LENGTH = 4096

# key for lines without `=`, if `store_any_line` enabled.
NONAME = '{NONAME}'

COMMENT_MARKS = (';', '#')


class LineKind(str, Enum):
    COMMENT = 'comment'
    SECTION = 'section'
    ITEM = 'item'
    CONTENT = 'content'
