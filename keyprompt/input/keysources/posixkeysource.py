"""
module keyprompt.input.keysources.posixkeysource

Contains the definition of the PosixKeySource class, a key source that reads
single keystrokes from a posix terminal by switching it into raw mode for the
duration of each read
"""

import codecs
from contextlib import suppress
import os
import sys
import termios
from typing import List

from prompt_toolkit.input.vt100 import raw_mode

from ..abstract import KeySource
from ..exceptions import KeyReadException


class PosixKeySource(KeySource):
    """
    class PosixKeySource

    A key source that reads single keystrokes from a posix terminal. The
    terminal is put into raw mode for each individual read and restored
    immediately afterwards, even when the read fails
    """

    __decoder: codecs.IncrementalDecoder
    __fileno: int
    __pending: List[str]

    def __init__(self: "PosixKeySource", fileno: int | None = None) -> None:
        self.__fileno = fileno if fileno is not None else sys.stdin.fileno()
        self.__decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self.__pending = []

    @property
    def fileno(self: "PosixKeySource") -> int:
        return self.__fileno

    def next_key(self: "PosixKeySource") -> str:
        # a single byte can complete more than one character when the
        # previous bytes were an invalid sequence
        if self.__pending:
            return self.__pending.pop(0)

        with raw_mode(self.__fileno):
            while not self.__pending:
                self.__pending.extend(self.__decoder.decode(self._read_byte()))

        return self.__pending.pop(0)

    def _read_byte(self: "PosixKeySource") -> bytes:
        data: bytes
        try:
            data = os.read(self.__fileno, 1)
        except OSError as ose:
            raise KeyReadException(
                f"Unable to read from file descriptor {self.__fileno}: {ose}"
            ) from ose

        if len(data) == 0:
            raise EOFError(f"End of input reached on file descriptor {self.__fileno}")

        return data

    def reset(self: "PosixKeySource") -> None:
        # discard anything typed before the failure. tcflush fails when the
        # file descriptor is not a terminal
        with suppress(termios.error):
            termios.tcflush(self.__fileno, termios.TCIFLUSH)

        self.__decoder.reset()
        self.__pending.clear()
