"""
module keyprompt.input.abstract.keysource

Contains the definition of the KeySource class, an abstract base class that
is extended by every source of raw keystrokes (i.e., a posix terminal)
"""

from abc import ABCMeta, abstractmethod


class KeySource(metaclass=ABCMeta):
    """
    class KeySource

    Abstract base class that is extended by every source of raw keystrokes.
    A key source delivers one keystroke at a time without line buffering or
    local echo
    """

    @abstractmethod
    def next_key(self: "KeySource") -> str:
        """
        Blocks until the user presses a key and returns it

        Args:
            None

        Returns:
            str: The single character that was read

        Raises:
            KeyReadException: If reading failed but may be retried after reset()
            EOFError: If the input stream has been closed
        """

    def reset(self: "KeySource") -> None:
        """
        Clears any error state left behind by a failed read so that reading
        may continue

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """
