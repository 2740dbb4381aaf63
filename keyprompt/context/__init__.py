"""
module keyprompt.context

Contains dataclass definitions related to the representation of the context
of an individual keyprompt session
"""

from .promptcontext import PromptContext
