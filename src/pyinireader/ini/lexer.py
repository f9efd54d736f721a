# -*- encoding: utf-8 -*-
# @File   : lexer.py
# @Time   : 2024/10/12 21:52:03

"""Single line classification.

The order of checks matters:

    1. comments (blank, too long, `;` or `#` leading)
    2. items, split at the FIRST `=`
    3. section headers, `[...]` covering the whole line
    4. anything else

So `[a=b]` is an item rather than a header.
"""

from typing import NamedTuple

from .consts import COMMENT_MARKS, MAX_LINE_LENGTH, LineKind


class IniLine(NamedTuple):
    kind: LineKind
    # section name for SECTION, key for ITEM.
    name: str = ''
    # value for ITEM, raw line for CONTENT.
    value: str = ''


def is_comment(line: str) -> bool:
    return (
        not line
        or len(line) > MAX_LINE_LENGTH
        or line.startswith(COMMENT_MARKS)
    )


def classify(line: str) -> IniLine:
    """Classify one line, which has been split and had `\\r` removed."""
    if is_comment(line):
        return IniLine(LineKind.COMMENT)

    # a line feed survives only when `\r` was picked as delimiter.
    # neither pattern matches across it.
    if '\n' not in line:
        key, sep, val = line.partition('=')
        if sep:
            return IniLine(LineKind.ITEM, key.strip(), val.strip())
        if len(line) > 1 and line[0] == '[' and line[-1] == ']':
            return IniLine(LineKind.SECTION, line[1:-1])

    return IniLine(LineKind.CONTENT, value=line)
