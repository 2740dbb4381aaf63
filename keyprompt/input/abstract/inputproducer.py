"""
module keyprompt.input.abstract.inputproducer

Contains the definition of the InputProducer class, an abstract base class that
is extended by every component that turns keystrokes into a candidate string
"""

from abc import ABCMeta, abstractmethod
import logging

from ... import constants
from ..display import TerminalDisplay
from ..exceptions import KeyReadException, UserExit
from .keysource import KeySource

logger = logging.getLogger(__name__)


class InputProducer(metaclass=ABCMeta):
    """
    class InputProducer

    Abstract base class of every component that turns keystrokes read from
    a key source into a candidate string. Calling an input producer captures
    one candidate
    """

    key_source: KeySource
    display: TerminalDisplay

    def __init__(
        self: "InputProducer", key_source: KeySource, display: TerminalDisplay
    ) -> None:
        self.key_source = key_source
        self.display = display

    def __call__(self: "InputProducer") -> str:
        return self.capture()

    @abstractmethod
    def capture(self: "InputProducer") -> str:
        """
        Reads keystrokes until one candidate string is complete

        Args:
            None

        Returns:
            str: The candidate string the user entered

        Raises:
            UserExit: If input was closed before the candidate was complete
            KeyboardInterrupt: If the user pressed Ctrl-C
        """

    def _read_key(self: "InputProducer") -> str:
        while True:
            try:
                key: str = self.key_source.next_key()
            except KeyReadException as kre:
                # the user simply gets another chance to type
                logger.warning("Resetting key source after failed read: %s", kre)
                self.key_source.reset()
                continue
            except EOFError as eof:
                raise UserExit("EOFError while reading a keystroke") from eof

            # raw mode disables signal generation so Ctrl-C arrives as a key
            if key == constants.KEY_INTERRUPT:
                raise KeyboardInterrupt

            return key
