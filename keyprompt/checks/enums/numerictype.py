"""
module keyprompt.checks.enums.numerictype

Contains the definition of the NumericType enum which lists the numeric kinds
that the numeric and range checks can parse user input as, along with the
details of each kind (signedness and representable range)
"""

from dataclasses import dataclass
from enum import auto, Enum
import sys
from typing import Any, Dict

from ..exceptions import NonNumericTypeException


class NumericType(Enum):
    INT = auto()
    INT8 = auto()
    INT16 = auto()
    INT32 = auto()
    INT64 = auto()
    UINT8 = auto()
    UINT16 = auto()
    UINT32 = auto()
    UINT64 = auto()
    FLOAT = auto()
    FLOAT32 = auto()

    @property
    def floating(self: "NumericType") -> bool:
        return _numeric_type_details[self].floating

    @property
    def signed(self: "NumericType") -> bool:
        return _numeric_type_details[self].signed

    @property
    def minimum(self: "NumericType") -> int | float | None:
        return _numeric_type_details[self].minimum

    @property
    def maximum(self: "NumericType") -> int | float | None:
        return _numeric_type_details[self].maximum

    def parse(self: "NumericType", literal: str) -> int | float:
        """
        Parses a literal that has already passed the numeric syntax check for
        this type

        Args:
            literal (str): The literal to parse

        Returns:
            int | float: The parsed value

        Raises:
            OverflowError: If the value cannot be represented by this type
        """

        value: int | float = float(literal) if self.floating else int(literal)

        if (self.minimum is not None and value < self.minimum) or (
            self.maximum is not None and value > self.maximum
        ):
            raise OverflowError(f"{literal!r} is out of range for {self.name}")

        return value


@dataclass(frozen=True)
class _NumericTypeDetails:
    floating: bool
    signed: bool
    minimum: int | float | None
    maximum: int | float | None


def _integer_details(bits: int, signed: bool) -> _NumericTypeDetails:
    if signed:
        return _NumericTypeDetails(
            floating=False,
            signed=True,
            minimum=-(2 ** (bits - 1)),
            maximum=2 ** (bits - 1) - 1,
        )

    return _NumericTypeDetails(
        floating=False, signed=False, minimum=0, maximum=2**bits - 1
    )


# largest finite single precision value
_FLOAT32_MAX: float = (2 - 2**-23) * 2.0**127

_numeric_type_details: Dict[NumericType, _NumericTypeDetails] = {
    NumericType.INT: _NumericTypeDetails(
        floating=False, signed=True, minimum=None, maximum=None
    ),
    NumericType.INT8: _integer_details(8, signed=True),
    NumericType.INT16: _integer_details(16, signed=True),
    NumericType.INT32: _integer_details(32, signed=True),
    NumericType.INT64: _integer_details(64, signed=True),
    NumericType.UINT8: _integer_details(8, signed=False),
    NumericType.UINT16: _integer_details(16, signed=False),
    NumericType.UINT32: _integer_details(32, signed=False),
    NumericType.UINT64: _integer_details(64, signed=False),
    NumericType.FLOAT: _NumericTypeDetails(
        floating=True,
        signed=True,
        minimum=-sys.float_info.max,
        maximum=sys.float_info.max,
    ),
    NumericType.FLOAT32: _NumericTypeDetails(
        floating=True, signed=True, minimum=-_FLOAT32_MAX, maximum=_FLOAT32_MAX
    ),
}

_builtin_numeric_types: Dict[type, NumericType] = {
    int: NumericType.INT,
    float: NumericType.FLOAT,
}


def resolve_numeric_type(kind: Any) -> NumericType:
    """
    Resolves the numeric kind passed to a check factory into a NumericType

    Args:
        kind (Any): A NumericType member or one of the builtin types int or float

    Returns:
        NumericType: The corresponding NumericType

    Raises:
        NonNumericTypeException: If the kind cannot be considered numeric
    """

    if isinstance(kind, NumericType):
        return kind

    # bool is a subclass of int but is not accepted as a numeric kind
    if isinstance(kind, type) and kind in _builtin_numeric_types:
        return _builtin_numeric_types[kind]

    raise NonNumericTypeException(f"Type {kind!r} must be numeric")
