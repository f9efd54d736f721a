# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:10:45

"""
Basically INI Structure with multi-valued sections.

A section is NOT a dict here. Keys may repeat, and every duplicate is kept
in the order it was read (or set), like:

    ```ini
    [servers]
    server = alpha
    server = beta
    ```
"""

from collections.abc import MutableMapping, Sequence
from typing import Iterable, Iterator, NamedTuple, overload


class IniError(Exception):
    """Base of everything raised by this package."""
    pass


class SectionNotFound(IniError, KeyError):
    pass


class NotParsed(IniError):
    """Reading before any successful parse (or `set`)."""
    pass


class IniItem(NamedTuple):
    key: str
    value: str


class IniSection(Sequence[IniItem]):
    """INI 小节，一个有序的多值键值表。

    同名键会全部保留，按插入顺序排列。
    `revision` 在每次增删后递增，供 `IniStore` 判断缓存是否过期。
    """

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self.__items: list[IniItem] = [IniItem(k, v) for k, v in items]
        self.__revision = 0

    @overload
    def __getitem__(self, index: int) -> IniItem: ...
    @overload
    def __getitem__(self, index: slice) -> list[IniItem]: ...

    def __getitem__(self, index):
        return self.__items[index]

    def __len__(self) -> int:
        return len(self.__items)

    def __iter__(self) -> Iterator[IniItem]:
        return iter(self.__items)

    def __contains__(self, key: object) -> bool:
        """Note: tests the KEY, not the `IniItem`."""
        return any(i.key == key for i in self.__items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return NotImplemented
        return self.__items == list(other)

    def __repr__(self) -> str:
        return 'IniSection(%r)' % self.__items

    @property
    def revision(self) -> int:
        return self.__revision

    def add(self, key: str, value: str) -> None:
        """Append, never overwrite."""
        self.__items.append(IniItem(key, value))
        self.__revision += 1

    def remove(self, key: str) -> int:
        """Drop all items of `key`. Returns how many were dropped."""
        kept = [i for i in self.__items if i.key != key]
        removed = len(self.__items) - len(kept)
        if removed:
            self.__items = kept
            self.__revision += 1
        return removed

    def remove_first(self, key: str) -> bool:
        for idx, i in enumerate(self.__items):
            if i.key == key:
                del self.__items[idx]
                self.__revision += 1
                return True
        return False

    def snapshot(self) -> tuple[IniItem, ...]:
        return tuple(self.__items)

    def copy(self) -> 'IniSection':
        return IniSection(self.__items)


class SectionCache(NamedTuple):
    name: str
    revision: int
    items: tuple[IniItem, ...]


class IniStore(MutableMapping[str, IniSection]):
    """INI 文档本体：小节名到 `IniSection` 的有序映射。

    Also holds the cache of the last touched section, so that chained
    reads against one section skip the lookup. The cache is refreshed
    in `self._sync()` only.
    """

    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}
        self.__cache: SectionCache | None = None

    def __getitem__(self, key: str) -> IniSection:
        if key not in self.__raw:
            raise SectionNotFound(key)
        return self.__raw[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Iterable[tuple[str, str]]
    ) -> None:
        # never keep the caller's object.
        self.__raw[key] = (
            value.copy() if isinstance(value, IniSection)
            else IniSection(value))
        self._sync(key)

    def __delitem__(self, key: str) -> None:
        if key not in self.__raw:
            raise SectionNotFound(key)
        del self.__raw[key]
        self._sync(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return 'IniStore(%r)' % self.__raw

    @property
    def cache(self) -> SectionCache | None:
        return self.__cache

    def _sync(self, key: str) -> None:
        """Reload the cache if it is (or should now be) about `key`."""
        if self.__cache is None or self.__cache.name != key:
            return
        if key not in self.__raw:
            self.__cache = None
        else:
            self.__cache = self.__cache_of(key)

    def __cache_of(self, key: str) -> SectionCache:
        sect = self.__raw[key]
        return SectionCache(key, sect.revision, sect.snapshot())

    def load(self, key: str) -> tuple[IniItem, ...]:
        """Get items of section `key`, through the cache.

        Raises `SectionNotFound`.
        """
        if key not in self.__raw:
            raise SectionNotFound(key)
        cached = self.__cache
        # revision check catches changes made on `self[key]` directly.
        if (cached is None or cached.name != key
                or cached.revision != self.__raw[key].revision):
            self.__cache = cached = self.__cache_of(key)
        return cached.items

    def append(self, section: str, key: str, value: str) -> None:
        """Add an item, creating the section if needed."""
        self.__raw.setdefault(section, IniSection()).add(key, value)
        self._sync(section)

    def discard(self, section: str, key: str) -> int:
        removed = self[section].remove(key)
        if removed:
            self._sync(section)
        return removed

    def discard_first(self, section: str, key: str) -> bool:
        removed = self[section].remove_first(key)
        if removed:
            self._sync(section)
        return removed

    def setdefault(
        self, key: str,
        default: IniSection | Iterable[tuple[str, str]] = (),
    ) -> IniSection:
        if key not in self:
            self[key] = default
        # the stored copy, not `default` itself.
        return self[key]

    def clear(self) -> None:
        self.__raw.clear()
        if self.__cache is not None:
            self._sync(self.__cache.name)
