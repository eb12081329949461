from domain.models.rates import DayRecord, SummaryRecord

from .daily_series import percent_change


class SummaryCalculator:
	def calculate(self, days: list[DayRecord]) -> SummaryRecord:
		start_rate = days[0].rate if days else None
		end_rate = days[-1].rate if days else None

		present = [day.rate for day in days if day.rate is not None]
		mean_rate = sum(present) / len(present) if present else None

		return SummaryRecord(
			start_rate=start_rate,
			end_rate=end_rate,
			total_pct_change=percent_change(start_rate, end_rate),
			mean_rate=mean_rate,
		)
