"""Type format checks and coercion for paramguard.

Each parameter type maps to a ``TypeHandler``: an optional format pattern
matched against the value's string form, and a coercion function. The
table is built on first use and never modified afterwards.
"""

import math
import re
from collections.abc import Callable, Mapping
from decimal import Decimal
from functools import lru_cache
from types import MappingProxyType
from typing import Any, NamedTuple

from paramguard.rules import ParamType

from .errors import InvalidParamType, InvalidParamValue

TRUE_LITERALS = frozenset({"1", "true", "TRUE", "T", "Y"})
FALSE_LITERALS = frozenset({"0", "false", "FALSE", "F", "N"})

_INTEGER_PREFIX = re.compile(r"\s*[-+]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


class TypeHandler(NamedTuple):
    """Format pattern and coercion function for one parameter type."""

    pattern: re.Pattern[str] | None
    coerce: Callable[[Any], Any]


def stringify(value: Any) -> str:
    """String form of a value as a request layer would have sent it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value):
        # Positional notation, so 1e-05 reads back as 0.00001
        return format(Decimal(repr(value)), "f")
    return str(value)


def to_integer(value: Any) -> int:
    """Truncating integer parse: ``"12abc"`` gives 12, non-numeric text gives 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        try:
            return int(value)
        except (ValueError, OverflowError) as e:
            raise InvalidParamValue(f"Cannot convert {value!r} to integer", value=value) from e
    match = _INTEGER_PREFIX.match(stringify(value))
    return int(match.group()) if match else 0


def to_float(value: Any) -> float:
    """Floating parse of the leading numeric part of a value, 0.0 when there is none."""
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    match = _FLOAT_PREFIX.match(stringify(value))
    return float(match.group()) if match else 0.0


def to_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = stringify(value)
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    raise InvalidParamValue(f"Could not typecast boolean to appropriate value: {value!r}", value=value)


def to_array(value: Any) -> Any:
    # Arrays travel as comma-delimited strings
    if isinstance(value, str):
        return value.split(",")
    return value


def _passthrough(value: Any) -> Any:
    return value


@lru_cache(maxsize=1)
def type_handlers() -> Mapping[ParamType, TypeHandler]:
    """Return the read-only mapping of parameter types to their handlers."""
    decimal_pattern = re.compile(r"-?(\d*\.\d+|\d+)")
    return MappingProxyType(
        {
            ParamType.INTEGER: TypeHandler(re.compile(r"-?\d+"), to_integer),
            ParamType.FLOAT: TypeHandler(decimal_pattern, to_float),
            ParamType.DECIMAL: TypeHandler(decimal_pattern, to_float),
            # "T" is for the ISO date format
            ParamType.DATETIME: TypeHandler(re.compile(r"[-\d:T\s]+"), _passthrough),
            ParamType.BOOLEAN: TypeHandler(
                re.compile(r"1|true|TRUE|T|Y|0|false|FALSE|F|N"), to_boolean
            ),
            ParamType.STRING: TypeHandler(None, stringify),
            ParamType.ARRAY: TypeHandler(None, to_array),
            ParamType.BINARY: TypeHandler(None, _passthrough),
            ParamType.FILE: TypeHandler(None, _passthrough),
        }
    )


class TypeConverter:
    """Format checks and coercion driven by the type handler table."""

    @staticmethod
    def verify_format(name: str, value: Any, expected_type: ParamType) -> None:
        """Check that the value's string form matches the expected type's format.

        Types without a format pattern (string, array, binary, file) always pass.

        Raises:
            InvalidParamType: If the value does not match
        """
        handler = type_handlers().get(expected_type)
        if handler is None or handler.pattern is None:
            return
        if not handler.pattern.fullmatch(stringify(value)):
            raise InvalidParamType(
                f"Value for parameter '{name}' ({value}) is of the wrong type "
                f"(expected {expected_type.value})",
                param=name,
                value=value,
            )

    @staticmethod
    def coerce(param_type: ParamType | None, value: Any) -> Any:
        """Convert a raw value into its declared type.

        Unknown or missing types leave the value unchanged.

        Raises:
            InvalidParamValue: If a boolean value matches no boolean literal
        """
        handler = type_handlers().get(param_type) if param_type is not None else None
        if handler is None:
            return value
        return handler.coerce(value)
