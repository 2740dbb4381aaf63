"""
module keyprompt.input.keysources.scriptedkeysource

Contains the definition of the ScriptedKeySource class, a key source that
replays a fixed script of keystrokes instead of reading from a terminal
"""

from collections import deque
from typing import Deque, Iterable

from ..abstract import KeySource


class ScriptedKeySource(KeySource):
    """
    class ScriptedKeySource

    A key source that replays a fixed script of keystrokes. Each string in the
    script contributes each of its characters as a separate keystroke. An
    exception instance in the script is raised when it is reached, which allows
    read failures to be simulated. Once the script is exhausted, EOFError is
    raised
    """

    __script: Deque[str | BaseException]
    resets: int

    def __init__(
        self: "ScriptedKeySource", script: Iterable[str | BaseException]
    ) -> None:
        self.__script = deque()
        self.resets = 0

        for entry in script:
            if isinstance(entry, BaseException):
                self.__script.append(entry)
            else:
                self.__script.extend(entry)

    @property
    def exhausted(self: "ScriptedKeySource") -> bool:
        return len(self.__script) == 0

    def next_key(self: "ScriptedKeySource") -> str:
        if self.exhausted:
            raise EOFError("Key script exhausted")

        entry: str | BaseException = self.__script.popleft()
        if isinstance(entry, BaseException):
            raise entry

        return entry

    def reset(self: "ScriptedKeySource") -> None:
        self.resets += 1
