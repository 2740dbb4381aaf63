"""
module keyprompt.entrypoint

Contains the definition of the main() method that is invoked when keyprompt
is run directly as a module from the command line. It walks the user through
a short form that uses every input style
"""

from . import checks
from .checks.enums import NumericType
from .input.enums import Style
from .input.exceptions import UserExit
from .keyprompt import KeyPrompt


def main() -> int:
    """
    Runs the keyprompt demonstration form on the current terminal

    Args:
        Nothing

    Returns:
        int: Exit code to return to be returned to the system

    Raises:
        Nothing
    """

    session: KeyPrompt = KeyPrompt()

    try:
        name: str = session.get(
            "Name",
            checks.custom(checks.consists_of("a-zA-Z "), "Use letters and spaces only"),
        )
        session.get(
            "PIN",
            checks.custom(checks.length(4), "A PIN is exactly 4 digits"),
            checks.custom(checks.numeric(NumericType.UINT16), "Use digits only"),
            style=Style.MASKED,
        )
        age: str = session.get(
            "Age",
            checks.custom(
                checks.range_(int, 0, 130), "Enter a whole number from 0 to 130"
            ),
        )
        answer: str = session.ask(
            "Save this profile [y/n]", checks.is_("y", "n"), style=Style.INSTANT
        )
    except UserExit:
        return 1
    except KeyboardInterrupt:
        print()
        return 130

    if checks.is_("y").accepts(answer):
        print(f"Saved profile for {name} ({age})")
    else:
        print("Discarded profile")

    return 0
