"""
module keyprompt.input.keysources

Contains the available key sources. The platform specific key sources are
only imported when requested as they depend on platform specific modules
(termios on posix, msvcrt on windows)
"""

import os

from ..abstract import KeySource
from .scriptedkeysource import ScriptedKeySource


def default_key_source() -> KeySource:
    """
    Constructs the key source that reads from the current platform's terminal

    Args:
        None

    Returns:
        KeySource: A key source reading from standard input

    Raises:
        NotImplementedError: If the current platform is not supported
    """

    # pylint: disable=import-outside-toplevel
    if os.name == "posix":
        from .posixkeysource import PosixKeySource

        return PosixKeySource()
    elif os.name == "nt":
        from .windowskeysource import WindowsKeySource

        return WindowsKeySource()

    raise NotImplementedError(f"OS {os.name!r} support not available")
