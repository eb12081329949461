import logging

from domain.exceptions.rates import InvalidDateFormatError, InvalidRangeError
from domain.models.rates import SummaryMode, SummaryResult
from utils.dates import parse_iso_date

from .daily_series import DailySeriesBuilder
from .rate_normalizer import RateNormalizer
from .retrying_fetcher import RetryingFetcher
from .summary_calculator import SummaryCalculator

logger = logging.getLogger(__name__)


class SummaryService:
	def __init__(
		self,
		fetcher: RetryingFetcher,
		from_currency: str = 'EUR',
		to_currency: str = 'USD',
	):
		self.fetcher = fetcher
		self.from_currency = from_currency
		self.to_currency = to_currency
		self.normalizer = RateNormalizer(to_currency)
		self.series_builder = DailySeriesBuilder()
		self.calculator = SummaryCalculator()

	async def get_summary(
		self, start: str, end: str, mode: SummaryMode = SummaryMode.DAY
	) -> SummaryResult:
		logger.info(f'Summary request received: start={start}, end={end}, mode={mode.value}')

		try:
			start_date = parse_iso_date(start)
			end_date = parse_iso_date(end)
		except InvalidDateFormatError:
			logger.warning(f'Invalid date format provided: start={start}, end={end}')
			raise

		if start_date > end_date:
			logger.warning(f'Invalid date range: start={start_date} > end={end_date}')
			raise InvalidRangeError()

		raw = await self.fetcher.fetch(start_date, end_date, self.from_currency, self.to_currency)
		rate_map = self.normalizer.normalize(raw)
		days = self.series_builder.build(rate_map, start_date, end_date)
		summary = self.calculator.calculate(days)

		total = f'{summary.total_pct_change:.2f}%' if summary.total_pct_change is not None else None
		logger.info(
			f'Summary calculation completed: {len(days)} days processed, '
			f'start_rate={summary.start_rate}, end_rate={summary.end_rate}, '
			f'total_pct_change={total}'
		)

		return SummaryResult(summary=summary, days=days if mode is SummaryMode.DAY else [])
