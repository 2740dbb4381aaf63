"""
module keyprompt.checks.abstract.check

Contains the definition of the Check class, an abstract base class that
is extended by every predicate that can validate user input
"""

from abc import ABCMeta, abstractmethod

from ..dataclasses import ValidationOutcome


class Check(metaclass=ABCMeta):
    """
    class Check

    Abstract base class of a named predicate over a candidate string. A check
    holds no mutable state: all of its parameters are fixed when it is
    constructed, so it may be evaluated any number of times and shared
    between prompts and combinators
    """

    def __call__(self: "Check", candidate: str) -> None:
        """
        Evaluates this check and raises if it rejects the candidate

        Args:
            candidate (str): The string the user entered

        Returns:
            Nothing

        Raises:
            InvalidInputException: If this check rejects the candidate
        """

        self.evaluate(candidate).raise_if_rejected()

    def accepts(self: "Check", candidate: str) -> bool:
        return self.evaluate(candidate).accepted

    @abstractmethod
    def evaluate(self: "Check", candidate: str) -> ValidationOutcome:
        """
        Evaluates this check against a candidate string

        Args:
            candidate (str): The string the user entered

        Returns:
            ValidationOutcome: Whether the candidate was accepted and, if not,
                the message to show to the user

        Raises:
            Nothing
        """

    @property
    def name(self: "Check") -> str:
        """
        Returns a short human-readable name for this check that is used
        when logging rejections
        """

        return type(self).__name__

    def __repr__(self: "Check") -> str:
        return f"<{self.name}>"
