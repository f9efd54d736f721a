# -*- encoding: utf-8 -*-
# @File   : options.py
# @Time   : 2024/10/12 22:47:31

from dataclasses import dataclass, field
from typing import Callable


@dataclass(kw_only=True)
class IniOptions:
    """How an `IniReader` parses and stores text.

    Attributes:
        include_sections: if not empty, only these sections are stored,
            and parsing stops as soon as all of them (in this order)
            have been read.
        exclude_sections: sections never stored.
        store_any_line: keep lines without `=` under `{NONAME}`.
        transcode: applied to the whole text before parsing.
        encoding: codec for `parse_file()` and `to_file()`.
            `None` means the system default, then `chardet` guessing.
    """
    include_sections: list[str] = field(default_factory=list)
    exclude_sections: list[str] = field(default_factory=list)
    store_any_line: bool = False
    transcode: Callable[[str], str] | None = None
    encoding: str | None = None

    def is_ignored(self, section: str) -> bool:
        if section in self.exclude_sections:
            return True
        return bool(self.include_sections) and (
            section not in self.include_sections)
