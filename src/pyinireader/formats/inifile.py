# -*- encoding: utf-8 -*-
# @File   : inifile.py
# @Time   : 2024/10/13 01:05:40

"""Plain text IO of INI files.

Files are read and written with `newline=''`, so `\\r` stays untouched
and the parser can pick its own line delimiter.
"""

import logging

import chardet

from ..abstract import FileHandler


class IniFileHandler(FileHandler[str]):
    # below this `chardet` guess is not trusted.
    MIN_CONFIDENCE = 0.8

    @classmethod
    def decode(cls, raw: bytes) -> str:
        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < cls.MIN_CONFIDENCE):
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            logging.info(
                f'Failed to decode as {codec["encoding"]}, try gbk instead.')
            return raw.decode('gbk')

    def _decode_file(self) -> str:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        return self.decode(raw)

    def read(self) -> str:
        """读取整个文件为字符串。

        May raise `OSError`, and `UnicodeDecodeError` if even `gbk` fails.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong, fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec, newline='') as fp:
                return fp.read()
        except UnicodeDecodeError:
            logging.debug(f'Guessing encoding of "{self._fn}".')
            return self._decode_file()

    def write(self, instance: str) -> None:
        with open(self._fn, 'w', encoding=self._codec or 'utf-8',
                  newline='') as fp:
            fp.write(instance)

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f' ({self._codec})'
