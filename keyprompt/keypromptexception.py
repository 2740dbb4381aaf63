"""
module keyprompt.keypromptexception

Contains the definition of the KeyPromptException class, the parent of all
exceptions directly thrown by keyprompt, its checks and its key sources
"""


class KeyPromptException(RuntimeError):
    """
    class KeyPromptException

    The parent class of all exceptions directly thrown by keyprompt
    """
