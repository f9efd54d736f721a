# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 23:05:12

"""Text to `IniStore`.

Note: parsing is NOT transactional. When an error raised,
sections committed before the failing line are still in the store.
Call `IniStore.clear()` (or `IniReader.erase_all()`) before retrying.
"""

import logging

from .consts import MAX_LINE_LENGTH, NONAME, LineKind
from .lexer import classify
from .model import IniError, IniSection, IniStore
from .options import IniOptions


class IniParseError(IniError):
    """To record errors when parsing INI text."""

    def __init__(self, msg: str, lineno: int) -> None:
        super().__init__(f'line {lineno}: {msg}')
        self.lineno = lineno


class ItemOutsideSection(IniParseError):
    pass


class DuplicateSection(IniParseError):
    def __init__(self, section: str, lineno: int) -> None:
        super().__init__(f'section [{section}] appears twice.', lineno)
        self.section = section


def pick_delimiter(text: str) -> str:
    # a single-line text may still be `\r` separated.
    return '\r' if text.count('\n') <= 1 else '\n'


class IniParser:
    def __init__(self, options: IniOptions | None = None) -> None:
        self._opt = options if options is not None else IniOptions()

    def parse(self, text: str, store: IniStore) -> list[str]:
        """Parse `text` into `store`, which will be cleared first.

        Returns names of the sections committed, in reading order.

        Raises:
            ItemOutsideSection: a `key=value` line before any header.
            DuplicateSection: a section committed twice.
        """
        store.clear()
        if self._opt.transcode is not None:
            text = self._opt.transcode(text)

        delimiter = pick_delimiter(text)
        logging.debug(f'Parsing {len(text)} chars, delimiter {delimiter!r}.')

        include = list(self._opt.include_sections)
        committed: list[str] = []
        current, excluded = '', False
        pending = IniSection()

        def commit(lineno: int) -> None:
            # empty sections are dropped, so they never count as duplicate.
            if not current or not len(pending):
                return
            if current in store:
                raise DuplicateSection(current, lineno)
            store[current] = pending
            committed.append(current)

        lineno = 0
        for lineno, raw in enumerate(text.split(delimiter), 1):
            line = raw.replace('\r', '')
            parsed = classify(line)
            match parsed.kind:
                case LineKind.COMMENT:
                    if len(line) > MAX_LINE_LENGTH:
                        logging.debug(f'Line {lineno} too long, skipped.')
                    continue
                case LineKind.ITEM:
                    if excluded:
                        continue
                    if not current:
                        raise ItemOutsideSection(
                            f'item "{parsed.name}" belongs to no section.',
                            lineno)
                    pending.add(parsed.name, parsed.value)
                case LineKind.SECTION:
                    excluded = self._opt.is_ignored(parsed.name)
                    commit(lineno)
                    pending = IniSection()
                    current = parsed.name
                case LineKind.CONTENT:
                    if self._opt.store_any_line and not excluded and current:
                        pending.add(NONAME, parsed.value)
            if include and include == committed:
                logging.debug(
                    f'All included sections read, stopped at line {lineno}.')
                break
        commit(lineno)

        logging.debug(f'Parsed {len(committed)} section(s).')
        return committed
