from .responses import DayResponse, HealthResponse, SummaryResponse, SummaryStatsResponse

__all__ = [
	'DayResponse',
	'HealthResponse',
	'SummaryResponse',
	'SummaryStatsResponse',
]
