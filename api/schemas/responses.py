from pydantic import BaseModel, ConfigDict, Field

from domain.models.rates import DayRecord, SummaryRecord, SummaryResult


class DayResponse(BaseModel):
	date: str = Field(..., description='Calendar date (YYYY-MM-DD)')
	rate: float | None = Field(None, description='Rate reported for the day, if any')
	pct_change: float | None = Field(None, description='Percent change against the previous day')

	@classmethod
	def from_record(cls, record: DayRecord) -> 'DayResponse':
		return cls(date=record.date, rate=record.rate, pct_change=record.pct_change)


class SummaryStatsResponse(BaseModel):
	start_rate: float | None = Field(None, description='Rate on the first day of the range')
	end_rate: float | None = Field(None, description='Rate on the last day of the range')
	total_pct_change: float | None = Field(None, description='Percent change from start to end')
	mean_rate: float | None = Field(None, description='Mean of all reported rates')

	@classmethod
	def from_record(cls, record: SummaryRecord) -> 'SummaryStatsResponse':
		return cls(
			start_rate=record.start_rate,
			end_rate=record.end_rate,
			total_pct_change=record.total_pct_change,
			mean_rate=record.mean_rate,
		)


class SummaryResponse(BaseModel):
	days: list[DayResponse] = Field(default_factory=list, description='Per-day series, empty in mode=none')
	summary: SummaryStatsResponse

	@classmethod
	def from_result(cls, result: SummaryResult) -> 'SummaryResponse':
		return cls(
			days=[DayResponse.from_record(day) for day in result.days],
			summary=SummaryStatsResponse.from_record(result.summary),
		)

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'days': [
					{'date': '2024-01-01', 'rate': 1.10, 'pct_change': None},
					{'date': '2024-01-02', 'rate': None, 'pct_change': None},
					{'date': '2024-01-03', 'rate': 1.12, 'pct_change': None},
				],
				'summary': {
					'start_rate': 1.10,
					'end_rate': 1.12,
					'total_pct_change': 1.818,
					'mean_rate': 1.11,
				},
			}
		}
	)


class HealthResponse(BaseModel):
	status: str = Field(..., description='Service status')
