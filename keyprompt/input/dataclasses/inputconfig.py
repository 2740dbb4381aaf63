"""
module keyprompt.input.dataclasses.inputconfig

Contains the definition of the InputConfig dataclass which selects how a single
call to keyprompt.input() captures and prompts for input
"""

from dataclasses import dataclass

from ..enums import Style


@dataclass(frozen=True)
class InputConfig:
    """
    class InputConfig

    Dataclass which selects the input style of a single prompt and whether
    its message is shown only before the first attempt or before every attempt
    """

    style: Style = Style.BASIC
    prompt_once: bool = False
