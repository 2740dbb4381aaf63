"""
module keyprompt.input.instantcapture

Contains the definition of the InstantCapture class, the input producer for
the instant input style
"""

from .. import constants
from .abstract import InputProducer
from .exceptions import UserExit


class InstantCapture(InputProducer):
    """
    class InstantCapture

    Input producer that returns the very first keystroke without waiting for
    enter. The keystroke is echoed in upper case but returned unchanged
    """

    def capture(self: "InstantCapture") -> str:
        key: str = self._read_key()
        if key == constants.KEY_END_OF_INPUT:
            raise UserExit("End of input instead of a keystroke")

        self.display.echo(key.upper())

        return key
