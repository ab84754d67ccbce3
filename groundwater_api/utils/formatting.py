"""
Helpers for interpolating metric values into alert and update text.
"""
import math
from enum import Enum
from typing import Any


def format_value(value: Any) -> str:
	"""
	Render a metric value for human-readable text.

	Whole floats lose their trailing ".0" (15.0 -> "15"), enums render as their
	value and missing values as "N/A".

	Args:
		value: Number, enum member, string or None

	Returns:
		Display string
	"""
	if value is None:
		return "N/A"
	if isinstance(value, Enum):
		return str(value.value)
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	return str(value)


def round_half_up(value: float) -> int:
	"""
	Round to the nearest integer with halves going towards positive infinity
	(-15.5 -> -15, 2.5 -> 3), unlike the built-in banker's rounding.
	"""
	return math.floor(value + 0.5)
