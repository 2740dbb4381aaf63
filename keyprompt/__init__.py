"""
module keyprompt.__init__

Contains the public call surface of keyprompt: the KeyPrompt session class and
the module-level input(), get(), ask() and validate() functions which use a
default session reading from the current terminal. Also contains definitions
that indicate the current version of keyprompt.
"""

# pylint: disable=redefined-builtin

__version_info__: tuple[int, ...] = (0, 1, 0)
__version__: str = ".".join(map(str, __version_info__))

from typing import Callable

from . import checks
from .checks import Check, InvalidInputException
from .input.dataclasses import InputConfig
from .input.enums import Style
from .input.exceptions import UserExit
from .keyprompt import CheckLike, KeyPrompt
from .keypromptexception import KeyPromptException

_default_session: KeyPrompt | None = None


def default_session() -> KeyPrompt:
    """
    Returns the session used by the module-level prompt functions, creating it
    on first use so that the terminal is not touched at import time
    """

    global _default_session  # pylint: disable=global-statement

    if _default_session is None:
        _default_session = KeyPrompt()

    return _default_session


def ask(
    question: str,
    *checks: CheckLike,
    style: Style = Style.BASIC,
    prompt_once: bool = True,
) -> str:
    return default_session().ask(
        question, *checks, style=style, prompt_once=prompt_once
    )


def get(
    label: str,
    *checks: CheckLike,
    style: Style = Style.BASIC,
    prompt_once: bool = False,
) -> str:
    return default_session().get(label, *checks, style=style, prompt_once=prompt_once)


def input(
    message: str,
    *checks: CheckLike,
    style: Style = Style.BASIC,
    prompt_once: bool = False,
    config: InputConfig | None = None,
) -> str:
    return default_session().input(
        message, *checks, style=style, prompt_once=prompt_once, config=config
    )


def validate(input_producer: Callable[[], str], *checks: CheckLike) -> str:
    return default_session().validate(input_producer, *checks)
