"""
Datetime utility functions.
"""
from typing import Optional
from datetime import datetime, date, timezone


def utc_timestamp(now: Optional[datetime] = None) -> str:
	"""
	ISO-8601 UTC timestamp with millisecond precision and a 'Z' suffix.

	Args:
		now: Moment to format, defaults to the current time

	Returns:
		Timestamp string such as 2024-01-15T10:30:00.000Z
	"""
	if now is None:
		now = datetime.now(timezone.utc)
	elif now.tzinfo is None:
		# Naive datetimes are assumed to already be UTC
		now = now.replace(tzinfo=timezone.utc)
	else:
		now = now.astimezone(timezone.utc)
	return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_en_in_date(value: Optional[date] = None) -> str:
	"""
	Short Indian-English date, day first without zero padding (15/1/2024).

	Args:
		value: Date to format, defaults to today

	Returns:
		Date string in D/M/YYYY format
	"""
	if value is None:
		value = datetime.now().date()
	return f"{value.day}/{value.month}/{value.year}"
