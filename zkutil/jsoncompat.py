"""Make dynamically typed data (e.g. parsed YAML) safe to encode as JSON."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    number = Decimal(repr(value)).normalize()
    sign, digits, exp = number.as_tuple()
    magnitude = len(digits) + exp - 1
    if -4 <= magnitude < 21:
        return format(number, "f")
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    exp_sign = "-" if magnitude < 0 else "+"
    return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(magnitude):02d}"


def _key_to_string(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "<nil>"
    if isinstance(key, float):
        return _format_float(key)
    return str(key)


def convert_to_json_compatible(value: Any) -> Any:
    """Recursively convert mappings so that every key is a string."""
    if isinstance(value, dict):
        return {_key_to_string(k): convert_to_json_compatible(v) for k, v in value.items()}
    if isinstance(value, list):
        return [convert_to_json_compatible(item) for item in value]
    return value


def convert_map_to_json_compatible(mapping: dict[str, Any]) -> dict[str, Any]:
    """Convert each value of ``mapping`` with :func:`convert_to_json_compatible`."""
    return {key: convert_to_json_compatible(value) for key, value in mapping.items()}