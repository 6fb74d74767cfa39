# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from io import StringIO
import logging
from typing import Generic, TypeVar

import chardet


T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Read/write port binding one document type to one file path."""

    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def _open_text(self) -> StringIO:
        """Load the whole file as decoded text.

        Try the codec given on construction (UTF-8 if none) first,
        then fallback to `chardet`.
        """
        try:
            with open(self._fn, 'r', encoding=self._codec or 'utf-8') as fp:
                return StringIO(fp.read())
        except UnicodeDecodeError:
            logging.info(
                f'{self._fn} is not {self._codec or "utf-8"} encoded, '
                'guessing the codec.')
            return self._decode_file(self._fn)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def __str__(self) -> str:
        return self._fn
