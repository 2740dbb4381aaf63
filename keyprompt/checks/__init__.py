"""
module keyprompt.checks

Contains the factory functions that construct checks. A check is passed to
keyprompt.input() (or any of its wrappers) to validate what the user typed:

    keyprompt.get("Age", checks.range_(int, 0, 130))
    keyprompt.ask("Continue", checks.is_("y", "n"), style=Style.INSTANT)

None of the factories evaluate anything when called; they only capture their
parameters in a new, immutable check
"""

import re
from typing import Any, Callable

from .abstract import Check
from .combinators import AnyCheck, CallableCheck, CustomCheck, InverseCheck
from .dataclasses import ValidationOutcome
from .enums import NumericType, resolve_numeric_type
from .exceptions import InvalidInputException, NonNumericTypeException
from .primitives import IsCheck, RangeCheck, RegexCheck

CheckLike = Check | Callable[[str], None]


def is_(*strings: str, case_sensitive: bool = False) -> Check:
    """
    Returns a check that accepts the user's input only if it is equal to any
    of the given strings

    Args:
        *strings (str): The strings to compare the user's input to
        case_sensitive (bool): Whether or not to compare the strings with
            case in mind

    Returns:
        Check: A check to call on the user's input

    Raises:
        Nothing
    """

    return IsCheck(*strings, case_sensitive=case_sensitive)


def matches_regex(pattern: str | re.Pattern) -> Check:
    """
    Returns a check that accepts the user's input only if the entire input
    matches the given regular expression

    Args:
        pattern (str | re.Pattern): The regular expression to match the user's
            input against

    Returns:
        Check: A check to call on the user's input

    Raises:
        re.error: If the pattern is not a valid regular expression
    """

    return RegexCheck(pattern)


def length(size: int) -> Check:
    """
    Returns a check that accepts the user's input only if it is exactly
    the given number of characters long

    Raises:
        ValueError: If size is negative
    """

    if size < 0:
        raise ValueError(f"Length {size} must not be negative")

    return RegexCheck(re.compile(f".{{{size}}}", re.DOTALL))


def consists_of(characters: str) -> Check:
    """
    Returns a check that accepts the user's input only if it consists exclusively
    of the given characters. The characters form the body of a regular expression
    character class, so ranges such as 'a-z' are allowed. Empty input is rejected

    Args:
        characters (str): The characters the user's input may consist of

    Returns:
        Check: A check to call on the user's input

    Raises:
        re.error: If the characters do not form a valid character class
    """

    return RegexCheck(f"[{characters}]+")


def numeric(kind: Any = int) -> Check:
    """
    Returns a check that accepts the user's input only if it is a literal
    for the given numeric type. Floating point types require a decimal point
    with digits on both sides; integer types only allow a leading minus sign
    if they are signed

    Args:
        kind (NumericType | type): The numeric type to check for. The builtin
            types int and float may be used in place of a NumericType

    Returns:
        Check: A check to call on the user's input

    Raises:
        NonNumericTypeException: If kind cannot be considered a numeric type
    """

    numeric_type: NumericType = resolve_numeric_type(kind)

    if numeric_type.floating:
        return RegexCheck(r"-?[0-9]+\.[0-9]+")

    return RegexCheck(("-?" if numeric_type.signed else "") + "[0-9]+")


def range_(
    kind: Any = int,
    minimum: int | float | None = None,
    maximum: int | float | None = None,
) -> Check:
    """
    Returns a check that accepts the user's input only if it is a literal for
    the given numeric type whose value lies within [minimum, maximum]

    Args:
        kind (NumericType | type): The numeric type to check for
        minimum (int | float | None): The minimum of the range. Defaults to the
            smallest value the type can represent
        maximum (int | float | None): The maximum of the range. Defaults to the
            largest value the type can represent

    Returns:
        Check: A check to call on the user's input

    Raises:
        NonNumericTypeException: If kind cannot be considered a numeric type
        ValueError: If minimum is greater than maximum
    """

    numeric_type: NumericType = resolve_numeric_type(kind)

    return RangeCheck(
        numeric(numeric_type),
        numeric_type,
        minimum=minimum if minimum is not None else numeric_type.minimum,
        maximum=maximum if maximum is not None else numeric_type.maximum,
    )


def as_check(check: CheckLike) -> Check:
    """
    Returns the given check unchanged, or adapts a plain function that raises
    InvalidInputException into a check

    Args:
        check (Check | Callable[[str], None]): The check or function to adapt

    Returns:
        Check: A check to call on the user's input

    Raises:
        TypeError: If check is neither a Check nor callable
    """

    if isinstance(check, Check):
        return check

    if not callable(check):
        raise TypeError(f"{check!r} is neither a Check nor callable")

    return CallableCheck(check)


def custom(check: CheckLike, message: str) -> Check:
    """
    Gives any check a new error message

    Args:
        check (Check | Callable[[str], None]): The check to attach a new error
            message to. A plain function raising InvalidInputException may be used
        message (str): The new error message for the check

    Returns:
        Check: A check to call on the user's input

    Raises:
        TypeError: If check is neither a Check nor callable
    """

    return CustomCheck(as_check(check), message)


def inverse(check: CheckLike) -> Check:
    return InverseCheck(as_check(check))


def any_(*checks: CheckLike) -> Check:
    """
    Returns a check that passes if any one of the given checks passes. Plain
    functions raising InvalidInputException may be mixed with checks
    """

    return AnyCheck(as_check(check) for check in checks)
