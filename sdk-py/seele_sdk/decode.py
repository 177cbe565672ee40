"""
Pydantic types for untyped JSON-RPC results, and translation of validation
failures into the SDK's decode errors.

Numbers reach the decoder as ``int``, ``float`` or ``Decimal`` depending on how
the transport parsed the body. They are only accepted when they carry no
fractional part and fit in 256 bits, and are converted to ``int`` exactly.
"""

import math
from decimal import Decimal
from typing import Annotated, Any, Dict, Tuple, Union

from pydantic import PlainValidator, StrictBool, StrictStr, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from .errors import DecodeError, FieldMissing, FieldTypeMismatch, NumericFormat

# Largest integer a double holds with no neighbour rounding onto it.
MAX_SAFE_FLOAT_INT = 2 ** 53 - 1

MAX_WIRE_BITS = 256
# Decimals whose leading digit sits past 10**77 are above 2**256.
MAX_DECIMAL_EXPONENT = 77

UINT64_MAX = 2 ** 64 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_EXPECTED = {
    "string_type": "string",
    "bool_type": "boolean",
    "number_type": "number",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}


def _numeric(reason: str) -> PydanticCustomError:
    return PydanticCustomError("numeric_format", "Number is {reason}", {"reason": reason})


def exact_int(value: Any) -> int:
    """Convert a wire number to ``int`` without rounding or truncation."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise PydanticCustomError("number_type", "Input should be a number")

    if isinstance(value, float):
        if not math.isfinite(value):
            raise _numeric("not finite")
        if not value.is_integer():
            raise _numeric("fractional")
        number = int(value)
    elif isinstance(value, Decimal):
        if not value.is_finite():
            raise _numeric("not finite")
        if not value:
            return 0
        # Checked before any conversion: 1e20000000 is short text but a huge int.
        if value.adjusted() > MAX_DECIMAL_EXPONENT:
            raise _numeric("out of range")
        if value != value.to_integral_value():
            raise _numeric("fractional")
        number = int(value)
    else:
        number = value

    if abs(number) >= 2 ** MAX_WIRE_BITS:
        raise _numeric("out of range")
    return number


def _fixed_width(low: int, high: int):
    def validate(value: Any) -> int:
        number = exact_int(value)
        if isinstance(value, float) and abs(number) > MAX_SAFE_FLOAT_INT:
            raise _numeric("beyond exact float range")
        if not low <= number <= high:
            raise _numeric(f"outside [{low}, {high}]")
        return number

    return validate


def none_as_empty(value: Any) -> Any:
    """Go nodes encode an empty slice as ``null``."""
    return [] if value is None else value


BigInt = Annotated[int, PlainValidator(exact_int)]
UInt64 = Annotated[int, PlainValidator(_fixed_width(0, UINT64_MAX))]
Int64 = Annotated[int, PlainValidator(_fixed_width(INT64_MIN, INT64_MAX))]
WireStr = StrictStr
WireBool = StrictBool


def json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def field_path(loc: Tuple[Union[int, str], ...]) -> str:
    """Render a pydantic ``loc`` as ``transactions[0].amount``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def to_decode_error(error: Dict[str, Any], method: str) -> DecodeError:
    path = field_path(error["loc"])
    kind = error["type"]
    if kind == "missing":
        return FieldMissing(method, path)
    if kind == "numeric_format":
        reason = error.get("ctx", {}).get("reason", error["msg"])
        return NumericFormat(method, path, error["input"], reason)
    return FieldTypeMismatch(method, path, _EXPECTED.get(kind, kind), json_type(error["input"]))


def validate(adapter: TypeAdapter, raw: Any, method: str) -> Any:
    """Validate ``raw`` and raise the first failure as a ``DecodeError``."""
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        raise to_decode_error(e.errors()[0], method) from e
