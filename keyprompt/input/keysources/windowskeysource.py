"""
module keyprompt.input.keysources.windowskeysource

Contains the definition of the WindowsKeySource class, a key source that reads
single keystrokes from the windows console using msvcrt
"""

import msvcrt  # pylint: disable=import-error

from ..abstract import KeySource

# prefixes the console sends ahead of the scan code of a special key
_SPECIAL_KEY_PREFIXES: str = "\x00\xe0"


class WindowsKeySource(KeySource):
    """
    class WindowsKeySource

    A key source that reads single keystrokes from the windows console.
    Special keys (arrows, function keys) are skipped
    """

    def next_key(self: "WindowsKeySource") -> str:
        key: str = msvcrt.getwch()
        while key in _SPECIAL_KEY_PREFIXES:
            # drop the scan code that follows the prefix
            msvcrt.getwch()
            key = msvcrt.getwch()

        return key
