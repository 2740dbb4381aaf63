"""
module keyprompt.input.display.terminaldisplay

Contains the definition of the TerminalDisplay class which writes prompts,
echoed keystrokes and cursor corrections to an output stream and rejection
messages to an error stream
"""

import sys
from typing import TextIO

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from ... import constants


class TerminalDisplay:
    """
    class TerminalDisplay

    Writes prompts, echoed keystrokes and cursor corrections to an output
    stream and rejection messages to an error stream. The streams default to
    the process' standard output and standard error at the time of each write
    """

    __error: TextIO | None
    __output: TextIO | None

    _default_style: Style = Style.from_dict(
        {
            "error.message": "fg:ansired",
        }
    )

    def __init__(
        self: "TerminalDisplay",
        output: TextIO | None = None,
        error: TextIO | None = None,
    ) -> None:
        self.__output = output
        self.__error = error

    @property
    def error(self: "TerminalDisplay") -> TextIO:
        return self.__error if self.__error is not None else sys.stderr

    @property
    def output(self: "TerminalDisplay") -> TextIO:
        return self.__output if self.__output is not None else sys.stdout

    def echo(self: "TerminalDisplay", key: str) -> None:
        self.write(key)

    def erase(self: "TerminalDisplay") -> None:
        """
        Erases the character before the cursor by stepping back over it,
        overwriting it with a blank and stepping back again
        """

        self.write(constants.ERASE_SEQUENCE)

    def newline(self: "TerminalDisplay") -> None:
        self.write("\n")

    def prompt(self: "TerminalDisplay", message: str) -> None:
        self.write(message)

    def reject(self: "TerminalDisplay", message: str) -> None:
        """
        Displays the message of a check that rejected the user's input

        Args:
            message (str): The message to display

        Returns:
            None

        Raises:
            Nothing
        """

        print_formatted_text(
            FormattedText([("class:error.message", message)]),
            style=self._default_style,
            file=self.error,
        )

    def write(self: "TerminalDisplay", text: str) -> None:
        self.output.write(text)
        self.output.flush()
