# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2024/10/13 02:14:09

"""The user-facing INI reader.

Every accessor comes in two forms:

    ```python
    reader = IniReader('config.ini')
    reader.get('common', 'name')       # explicit section
    reader.enter_section('common')
    reader.current.get('name')         # current section
    ```

Readers never raise: a missing section, a missing key and a reader not
parsed yet all give `''`, `False`, `0` or `[]`. Use `section_exists()` and
`item_exists()` to tell them apart. The only explicit failures are
`get_items()` and `enter_section()`.
"""

import logging
from os import PathLike
from typing import Any, Callable, Iterable, TypeVar

from ..formats.inifile import IniFileHandler
from ..formats.yamldoc import IniYamlHandler
from .model import IniError, IniItem, IniStore, NotParsed, SectionNotFound
from .options import IniOptions
from .parser import IniParser
from .writer import dumps

T = TypeVar('T')


def stringify(value: Any) -> str:
    """Value to text as the INI writers do: `%f` for floats."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return '%f' % value
    return str(value)


class IniReader:
    """A simple INI reader, storing sections and items in order.

    Keys may repeat in a section, and `set()` appends rather than
    overwrites. Parse errors are raised from `parse()`; see
    `ini.parser` for them.
    """

    def __init__(
        self,
        path: str | PathLike[str] | None = None, *,
        options: IniOptions | None = None
    ) -> None:
        """If `path` given, parse it right now."""
        self._opt = options if options is not None else IniOptions()
        self._store = IniStore()
        self._parsed = False
        self._current = ''
        if path is not None:
            self.parse_file(path)

    @property
    def options(self) -> IniOptions:
        return self._opt

    @property
    def store(self) -> IniStore:
        return self._store

    @property
    def parsed(self) -> bool:
        return self._parsed

    def include_section(self, section: str) -> None:
        """只保存指定的小节。对下一次解析生效。"""
        self._opt.include_sections.append(section)

    def exclude_section(self, section: str) -> None:
        """不保存指定的小节。对下一次解析生效。"""
        self._opt.exclude_sections.append(section)

    # parsing & exporting

    def parse(self, content: str) -> None:
        """Parse INI text. Previous content is dropped even on failure.

        Raises `IniParseError` (see `ini.parser`).
        """
        self.erase_all()
        IniParser(self._opt).parse(content, self._store)
        self._parsed = True

    def parse_file(self, path: str | PathLike[str]) -> None:
        """May raise `OSError` as well."""
        self.parse(IniFileHandler(path, self._opt.encoding).read())

    def to_string(self) -> str:
        if not self._parsed:
            return ''
        return dumps(self._store)

    def to_file(self, path: str | PathLike[str]) -> None:
        IniFileHandler(path, self._opt.encoding).write(self.to_string())

    def load_store(self, store: IniStore) -> None:
        """Take sections of `store` (copied) as if they were parsed.

        Include/exclude options are not applied here.
        """
        sections = [(name, sect.copy()) for name, sect in store.items()]
        self.erase_all()
        self._store.update(sections)
        self._parsed = True

    def read_yaml(self, path: str | PathLike[str]) -> None:
        """May raise `OSError` and `InvalidYamlDocument`."""
        self.load_store(IniYamlHandler(path).read())

    def write_yaml(self, path: str | PathLike[str]) -> None:
        IniYamlHandler(path).write(self._store)

    def erase_all(self) -> None:
        """Drop all data and reset the parse status."""
        self._store.clear()
        self._parsed = False

    # sections

    def section_exists(self, section: str) -> bool:
        return section in self._store

    def section_count(self) -> int:
        return len(self._store)

    def get_sections(self) -> list[str]:
        return list(self._store)

    @property
    def current_section(self) -> str:
        return self._current

    @current_section.setter
    def current_section(self, section: str) -> None:
        self.set_current_section(section)

    def set_current_section(self, section: str) -> None:
        """Unlike `enter_section()`, no existence check here."""
        self._current = section

    def enter_section(self, section: str) -> None:
        """Make `section` current, and cache it for the following reads.

        Raises `SectionNotFound`.
        """
        if section not in self._store:
            raise SectionNotFound(section)
        self._current = section
        self._store.load(section)

    @property
    def current(self) -> 'IniSectionProxy':
        """Accessors on whichever section is current at call time."""
        return IniSectionProxy(self)

    def section(self, section: str) -> 'IniSectionProxy':
        return IniSectionProxy(self, section)

    # readers

    def _load(self, section: str) -> tuple[IniItem, ...]:
        if not self._parsed:
            raise NotParsed(section)
        return self._store.load(section)

    def get_items(self, section: str) -> list[IniItem]:
        """获取小节中所有键值对（含重复键）。

        Raises:
            NotParsed: nothing parsed (or set) yet.
            SectionNotFound: no such section.
        """
        return list(self._load(section))

    def get_all(self, section: str, prefix: str) -> list[str]:
        """Values of every key starting with `prefix`, in order."""
        try:
            items = self._load(section)
        except IniError:
            return []
        return [v for k, v in items if k.startswith(prefix)]

    def get_first(self, section: str, prefix: str) -> str:
        ret = self.get_all(section, prefix)
        return ret[0] if ret else ''

    def get(self, section: str, key: str) -> str:
        """Value of the first item named exactly `key`."""
        try:
            items = self._load(section)
        except IniError:
            return ''
        for k, v in items:
            if k == key:
                return v
        return ''

    def get_bool(self, section: str, key: str) -> bool:
        # strictly lower case, `True`, `1` or `yes` are all false.
        return self.get(section, key) == 'true'

    def get_long(self, section: str, key: str, default: int = 0) -> int:
        try:
            return int(self.get(section, key))
        except ValueError:
            return default

    def get_double(
        self, section: str, key: str, default: float = 0.0
    ) -> float:
        try:
            return float(self.get(section, key))
        except ValueError:
            return default

    def get_array(
        self, section: str, key: str, separator: str = ',',
        size: int | None = None, *,
        converter: Callable[[str], T] = int, fill: Any = 0
    ) -> list[T]:
        """Split a value like `1,2,3` into a list.

        If `size` given, the result is cut or padded with `fill` to it.
        Elements unable to convert also become `fill`.
        """
        raw = self.get(section, key)
        if not raw:
            parts = []
        else:
            parts = raw.split(separator) if separator else [raw]
        if size is not None:
            parts = parts[:size]

        ret = []
        for i in parts:
            try:
                ret.append(converter(i.strip()))
            except ValueError:
                logging.warning(
                    f'[{section}] {key}: "{i}" is not a valid value, '
                    f'use {fill!r} instead.')
                ret.append(fill)
        if size is not None:
            ret.extend([fill] * (size - len(ret)))
        return ret

    def get_int_array(
        self, section: str, key: str, separator: str = ',',
        size: int | None = None
    ) -> list[int]:
        return self.get_array(section, key, separator, size)

    def item_exists(self, section: str, key: str) -> bool:
        try:
            items = self._load(section)
        except IniError:
            return False
        return any(k == key for k, _ in items)

    def item_prefix_exists(self, section: str, prefix: str) -> bool:
        try:
            items = self._load(section)
        except IniError:
            return False
        return any(k.startswith(prefix) for k, _ in items)

    def item_count(self, section: str) -> int:
        if not self._parsed or section not in self._store:
            return 0
        return len(self._store[section])

    # writers

    def set(self, section: str, key: str, value: str) -> int:
        """追加一个键值对（同名键不会被覆盖）。小节不存在时自动创建。"""
        self._parsed = True
        self._store.append(section, key, value)
        return 0

    def set_bool(self, section: str, key: str, value: bool) -> int:
        return self.set(section, key, 'true' if value else 'false')

    def set_long(self, section: str, key: str, value: int) -> int:
        return self.set(section, key, str(int(value)))

    def set_double(self, section: str, key: str, value: float) -> int:
        return self.set(section, key, '%f' % value)

    def set_array(
        self, section: str, key: str, separator: str,
        values: Iterable[Any], *,
        formatter: Callable[[Any], str] = stringify
    ) -> int:
        data = ''.join(formatter(i) + separator for i in values)
        if separator and data.endswith(separator):
            data = data[:-len(separator)]
        return self.set(section, key, data)

    def erase(self, section: str, key: str) -> int:
        """Remove all items named `key`.

        Returns how many were removed, or -1 if no such section.
        """
        if section not in self._store:
            return -1
        return self._store.discard(section, key)

    def erase_first(self, section: str, key: str) -> int:
        """Returns 0 if one item removed, otherwise -1."""
        if section not in self._store:
            return -1
        return 0 if self._store.discard_first(section, key) else -1


class IniSectionProxy:
    """`IniReader` accessors bound to one section.

    If no name given, the reader's current section is looked up on each
    call. Without a current section, readers give empty results and
    writers return -1.
    """

    def __init__(self, reader: IniReader, section: str | None = None) -> None:
        self._reader = reader
        self._name = section

    @property
    def name(self) -> str:
        return self._name if self._name is not None else (
            self._reader.current_section)

    def __str__(self) -> str:
        return f'[{self.name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, self.item_count())

    def get_items(self) -> list[IniItem]:
        if not self.name:
            raise SectionNotFound(self.name)
        return self._reader.get_items(self.name)

    def get_all(self, prefix: str) -> list[str]:
        return self._reader.get_all(self.name, prefix) if self.name else []

    def get_first(self, prefix: str) -> str:
        return self._reader.get_first(self.name, prefix) if self.name else ''

    def get(self, key: str) -> str:
        return self._reader.get(self.name, key) if self.name else ''

    def get_bool(self, key: str) -> bool:
        return self._reader.get_bool(self.name, key) if self.name else False

    def get_long(self, key: str, default: int = 0) -> int:
        if not self.name:
            return default
        return self._reader.get_long(self.name, key, default)

    def get_double(self, key: str, default: float = 0.0) -> float:
        if not self.name:
            return default
        return self._reader.get_double(self.name, key, default)

    def get_array(self, key: str, separator: str = ',',
                  size: int | None = None, **kwargs) -> list:
        if not self.name:
            fill = kwargs.get('fill', 0)
            return [] if size is None else [fill] * size
        return self._reader.get_array(
            self.name, key, separator, size, **kwargs)

    def get_int_array(self, key: str, separator: str = ',',
                      size: int | None = None) -> list[int]:
        return self.get_array(key, separator, size)

    def item_exists(self, key: str) -> bool:
        return bool(self.name) and self._reader.item_exists(self.name, key)

    def item_prefix_exists(self, prefix: str) -> bool:
        return bool(self.name) and (
            self._reader.item_prefix_exists(self.name, prefix))

    def item_count(self) -> int:
        return self._reader.item_count(self.name) if self.name else 0

    # writers return -1 without a section to write to.

    def set(self, key: str, value: str) -> int:
        return self._reader.set(self.name, key, value) if self.name else -1

    def set_bool(self, key: str, value: bool) -> int:
        if not self.name:
            return -1
        return self._reader.set_bool(self.name, key, value)

    def set_long(self, key: str, value: int) -> int:
        if not self.name:
            return -1
        return self._reader.set_long(self.name, key, value)

    def set_double(self, key: str, value: float) -> int:
        if not self.name:
            return -1
        return self._reader.set_double(self.name, key, value)

    def set_array(self, key: str, separator: str,
                  values: Iterable[Any], **kwargs) -> int:
        if not self.name:
            return -1
        return self._reader.set_array(
            self.name, key, separator, values, **kwargs)

    def erase(self, key: str) -> int:
        return self._reader.erase(self.name, key) if self.name else -1

    def erase_first(self, key: str) -> int:
        return self._reader.erase_first(self.name, key) if self.name else -1
