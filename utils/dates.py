from collections.abc import Iterator
from datetime import date, datetime, timedelta

from domain.exceptions.rates import InvalidDateFormatError


def parse_iso_date(value: str) -> date:
	"""Parse a ``YYYY-MM-DD`` calendar date."""
	try:
		return datetime.strptime(value, '%Y-%m-%d').date()
	except (TypeError, ValueError) as e:
		raise InvalidDateFormatError() from e


def iter_days(start: date, end: date) -> Iterator[date]:
	"""Yield every calendar day from start to end, both inclusive."""
	for offset in range((end - start).days + 1):
		yield start + timedelta(days=offset)

