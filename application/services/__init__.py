from .daily_series import DailySeriesBuilder
from .rate_normalizer import RateNormalizer
from .retrying_fetcher import RetryingFetcher
from .summary_calculator import SummaryCalculator
from .summary_service import SummaryService

__all__ = [
	'DailySeriesBuilder',
	'RateNormalizer',
	'RetryingFetcher',
	'SummaryCalculator',
	'SummaryService',
]
