"""
module keyprompt.input.lineeditor

Contains the definition of the LineEditor class, the input producer for the
basic and masked input styles
"""

from typing import List

from .. import constants
from .abstract import InputProducer, KeySource
from .display import TerminalDisplay
from .exceptions import UserExit


class LineEditor(InputProducer):
    """
    class LineEditor

    Input producer that reads keystrokes until the user presses enter and
    returns everything typed before it. Backspace removes the last character
    typed. When a mask is set, the mask is echoed in place of every character.
    Ctrl-D closes input when the line is empty
    """

    mask: str | None

    def __init__(
        self: "LineEditor",
        key_source: KeySource,
        display: TerminalDisplay,
        mask: str | None = None,
    ) -> None:
        super().__init__(key_source=key_source, display=display)

        self.mask = mask

    def capture(self: "LineEditor") -> str:
        line: List[str] = []

        while (key := self._read_key()) not in constants.KEYS_NEWLINE:
            if key == constants.KEY_END_OF_INPUT:
                # Ctrl-D only closes input on an empty line
                if len(line) == 0:
                    raise UserExit("End of input on an empty line")
                continue

            if key in constants.KEYS_BACKSPACE:
                # backspace on an empty line does nothing
                if len(line) > 0:
                    line.pop()
                    self.display.erase()
                continue

            line.append(key)
            self.display.echo(self.mask if self.mask is not None else key)

        return "".join(line)
