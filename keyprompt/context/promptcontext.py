"""
module keyprompt.context.promptcontext

Contains the definition of the PromptContext dataclass which stores the key
source and display that an individual keyprompt session reads from and
writes to
"""

from dataclasses import dataclass

from ..input.abstract import KeySource
from ..input.display import TerminalDisplay


@dataclass(frozen=True)
class PromptContext:
    """
    class PromptContext

    Dataclass which stores the key source and display that an individual
    keyprompt session reads from and writes to
    """

    key_source: KeySource
    display: TerminalDisplay
