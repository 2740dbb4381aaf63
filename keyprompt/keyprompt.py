"""
module keyprompt.keyprompt

Contains the definition of the KeyPrompt class, a session that prompts the user
through a key source and display and keeps re-prompting until what the user
entered passes every check it was given
"""

import logging
from typing import Callable, Iterable

from . import constants
from .checks import as_check, CheckLike
from .context import PromptContext
from .input import InstantCapture, LineEditor
from .input.abstract import InputProducer, KeySource
from .input.dataclasses import InputConfig
from .input.display import TerminalDisplay
from .input.enums import Style
from .input.keysources import default_key_source

logger = logging.getLogger(__name__)


class KeyPrompt:
    """
    class KeyPrompt

    A session that prompts the user through a key source and display. Every
    prompt keeps re-prompting until the user's input passes all of its checks
    """

    __context: PromptContext

    def __init__(
        self: "KeyPrompt",
        key_source: KeySource | None = None,
        display: TerminalDisplay | None = None,
    ) -> None:
        self.__context = PromptContext(
            key_source=key_source if key_source is not None else default_key_source(),
            display=display if display is not None else TerminalDisplay(),
        )

    @property
    def context(self: "KeyPrompt") -> PromptContext:
        return self.__context

    def ask(
        self: "KeyPrompt",
        question: str,
        *checks: CheckLike,
        style: Style = Style.BASIC,
        prompt_once: bool = True,
    ) -> str:
        """
        Asks the user a question in a human-like manner. The question is
        followed by a question mark and a new line and, by default, is only
        asked once no matter how many attempts the user needs
        """

        return self.input(
            question + constants.ASK_SUFFIX,
            *checks,
            style=style,
            prompt_once=prompt_once,
        )

    def get(
        self: "KeyPrompt",
        label: str,
        *checks: CheckLike,
        style: Style = Style.BASIC,
        prompt_once: bool = False,
    ) -> str:
        """
        Gets a value from the user in a computer-like manner. The label is
        followed by a colon and is shown again before every attempt by default
        """

        return self.input(
            label + constants.GET_SUFFIX,
            *checks,
            style=style,
            prompt_once=prompt_once,
        )

    def input(
        self: "KeyPrompt",
        message: str,
        *checks: CheckLike,
        style: Style = Style.BASIC,
        prompt_once: bool = False,
        config: InputConfig | None = None,
    ) -> str:
        """
        Prompts the user with a message and reads their input in the requested
        style until it passes every check

        Args:
            message (str): The message to prompt the user with
            *checks (Check): The checks the user's input must pass
            style (Style): The style of input to use
            prompt_once (bool): Whether the message is shown only before the
                first attempt rather than before every attempt
            config (InputConfig | None): A configuration that overrides style
                and prompt_once when provided

        Returns:
            str: The user's input

        Raises:
            UserExit: If input was closed before valid input was entered
            KeyboardInterrupt: If the user pressed Ctrl-C
        """

        if config is None:
            config = InputConfig(style=style, prompt_once=prompt_once)

        input_producer: InputProducer = self.producer_for(config.style)

        if config.prompt_once:
            self.context.display.prompt(message)
            return self.validate(input_producer, *checks)

        def prompting_producer() -> str:
            self.context.display.prompt(message)
            return input_producer()

        return self.validate(prompting_producer, *checks)

    def producer_for(self: "KeyPrompt", style: Style) -> InputProducer:
        """
        Constructs the input producer that captures input in the given style

        Args:
            style (Style): The style of input to capture

        Returns:
            InputProducer: An input producer bound to this session's key
                source and display

        Raises:
            NotImplementedError: If the style is not known
        """

        match style:
            case Style.BASIC:
                return LineEditor(self.context.key_source, self.context.display)
            case Style.MASKED:
                return LineEditor(
                    self.context.key_source,
                    self.context.display,
                    mask=constants.INPUT_MASK,
                )
            case Style.INSTANT:
                return InstantCapture(self.context.key_source, self.context.display)
            case _:
                raise NotImplementedError(f"Input style {style} not implemented")

    def validate(
        self: "KeyPrompt", input_producer: Callable[[], str], *checks: CheckLike
    ) -> str:
        """
        Calls an input producer until the string it returns passes every check.
        When no checks are given, the input producer is called exactly once

        Args:
            input_producer (Callable[[], str]): The input producer to call
            *checks (Check): The checks to apply, in order. A plain callable
                that raises InvalidInputException may be used as a check

        Returns:
            str: The first string returned by the input producer that passed
                every check

        Raises:
            Exception: Anything raised by the input producer
        """

        if len(checks) == 0:
            candidate: str = input_producer()
            self.context.display.newline()
            return candidate

        while True:
            candidate = input_producer()
            self.context.display.newline()

            if (message := self._first_rejection(candidate, checks)) is None:
                return candidate

            self.context.display.reject(message)

    @staticmethod
    def _first_rejection(candidate: str, checks: Iterable[CheckLike]) -> str | None:
        for check in map(as_check, checks):
            if (outcome := check.evaluate(candidate)).rejected:
                message: str = (
                    outcome.message
                    if outcome.message is not None
                    else constants.INVALID_INPUT_PROMPT
                )
                logger.debug("Input rejected by %s: %s", check.name, message)
                return message

        return None
