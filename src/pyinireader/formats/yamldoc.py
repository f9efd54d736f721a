# -*- encoding: utf-8 -*-
# @File   : yamldoc.py
# @Time   : 2024/10/13 01:38:52

"""Dump an `IniStore` as YAML, and load it back.

Since keys repeat, a section is a list of `[key, value]` pairs,
not a mapping:

    ```yaml
    servers:
    - [server, alpha]
    - [server, beta]
    ```
"""

import yaml

from ..abstract import FileHandler
from ..ini.model import IniError, IniStore


class InvalidYamlDocument(IniError):
    """To record errors when loading a YAML dumped store."""
    pass


class IniYamlHandler(FileHandler[IniStore]):
    def __init__(self, filename, encoding: str = 'utf-8') -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def to_document(store: IniStore) -> dict[str, list[list[str]]]:
        return {
            name: [[k, v] for k, v in sect] for name, sect in store.items()
        }

    @staticmethod
    def from_document(doc: object) -> IniStore:
        """Raises `InvalidYamlDocument` if `doc` is not shaped as above."""
        if doc is None:
            doc = {}
        if not isinstance(doc, dict):
            raise InvalidYamlDocument(
                f'expected a mapping of sections, got {type(doc).__name__}.')
        ret = IniStore()
        for name, pairs in doc.items():
            if pairs is None:
                pairs = []
            if not isinstance(pairs, list):
                raise InvalidYamlDocument(
                    f'section "{name}" should be a list of [key, value].')
            section = []
            for i in pairs:
                if not isinstance(i, list) or len(i) != 2:
                    raise InvalidYamlDocument(
                        f'section "{name}": {i!r} is not a [key, value] pair.')
                # may there be some pure digits considered as int
                k, v = i
                section.append((str(k), '' if v is None else str(v)))
            ret[str(name)] = section
        return ret

    def read(self) -> IniStore:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self.from_document(yaml.safe_load(fp))

    def write(self, instance: IniStore) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                self.to_document(instance), fp,
                allow_unicode=True, sort_keys=False,
                default_flow_style=None)
