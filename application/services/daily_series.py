from datetime import date

from domain.models.rates import DayRecord, RateMap
from utils.dates import iter_days


def percent_change(previous: float | None, current: float | None) -> float | None:
	if previous is None or previous == 0 or current is None:
		return None
	return (current - previous) / previous * 100


class DailySeriesBuilder:
	def build(self, rate_map: RateMap, start: date, end: date) -> list[DayRecord]:
		"""One record per calendar day in ``[start, end]``, ascending.

		The percent change of a day compares it with the immediately preceding
		day only; a missing rate on either side leaves it unset.
		"""
		days: list[DayRecord] = []
		previous_rate: float | None = None

		for day in iter_days(start, end):
			rate = rate_map.get(day.isoformat())
			pct_change = percent_change(previous_rate, rate) if days else None
			days.append(DayRecord(date=day.isoformat(), rate=rate, pct_change=pct_change))
			previous_rate = rate

		return days
