import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date
from typing import Any, Protocol

from tenacity import (
	AsyncRetrying,
	RetryCallState,
	retry_if_exception_type,
	stop_after_attempt,
	wait_exponential,
)

from domain.exceptions.rates import (
	FallbackError,
	FetchCancelledError,
	ProviderError,
	RatesUnavailableError,
)
from infrastructure.cache.memory_cache import MemoryCache

logger = logging.getLogger(__name__)

_CACHE_MISS = object()


class TimeseriesProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_timeseries(
		self, start: date, end: date, from_currency: str, to_currency: str
	) -> Any: ...


class PayloadSource(Protocol):
	async def load(self) -> Any: ...


class RetryingFetcher:
	"""Cache-backed upstream fetch with exponential backoff and a local snapshot fallback.

	Attempt ``i`` (zero-based) that fails and is not the last is followed by a
	``backoff * 2**i`` second pause. Once every attempt has failed the fallback
	source is read instead. Whatever is returned, live or fallback, is cached
	under the request key for ``cache_ttl`` seconds.
	"""

	def __init__(
		self,
		provider: TimeseriesProvider,
		fallback: PayloadSource,
		cache: MemoryCache,
		attempts: int = 3,
		backoff: float = 0.5,
		cache_ttl: float = 60,
		sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
	):
		if attempts < 1:
			raise ValueError('attempts must be >= 1')

		self.provider = provider
		self.fallback = fallback
		self.cache = cache
		self.attempts = attempts
		self.backoff = backoff
		self.cache_ttl = cache_ttl
		self._sleep = sleep
		self._inflight: set[asyncio.Task] = set()

	@staticmethod
	def make_cache_key(start: date, end: date, from_currency: str, to_currency: str) -> str:
		return f'api::{start.isoformat()}::{end.isoformat()}::{from_currency}->{to_currency}'

	async def fetch(self, start: date, end: date, from_currency: str, to_currency: str) -> Any:
		key = self.make_cache_key(start, end, from_currency, to_currency)
		logger.info(f'Fetching rates for {from_currency}->{to_currency} from {start} to {end}')

		cached = self.cache.get(key, _CACHE_MISS)
		if cached is not _CACHE_MISS:
			logger.info('Returning cached data')
			return cached

		try:
			payload = await self._fetch_with_retries(start, end, from_currency, to_currency)
			logger.info('Successfully fetched exchange rates from API')
		except ProviderError as upstream_error:
			logger.warning(f'API request failed: {upstream_error}. Attempting fallback to local file.')
			try:
				payload = await self.fallback.load()
			except FallbackError as fallback_error:
				logger.error(
					f'Both API and fallback failed. API error: {upstream_error}, '
					f'Fallback error: {fallback_error}'
				)
				raise RatesUnavailableError(upstream_error, fallback_error) from fallback_error
			logger.info('Successfully loaded fallback data')

		self.cache.set(key, payload, self.cache_ttl)
		return payload

	def cancel(self) -> int:
		"""Cancel every upstream attempt currently in flight. Returns how many were cancelled."""
		cancelled = 0
		for task in list(self._inflight):
			if task.cancel():
				cancelled += 1
		if cancelled:
			logger.warning(f'Cancelled {cancelled} in-flight upstream request(s)')
		return cancelled

	async def _fetch_with_retries(
		self, start: date, end: date, from_currency: str, to_currency: str
	) -> Any:
		retrying = AsyncRetrying(
			stop=stop_after_attempt(self.attempts),
			wait=wait_exponential(multiplier=self.backoff, exp_base=2),
			retry=retry_if_exception_type(ProviderError),
			sleep=self._sleep,
			before_sleep=self._log_retry,
			reraise=True,
		)

		try:
			async for attempt in retrying:
				with attempt:
					number = attempt.retry_state.attempt_number
					logger.info(f'API request attempt {number}/{self.attempts} to {self.provider.name}')
					return await self._attempt(start, end, from_currency, to_currency)
		except ProviderError:
			logger.error(f'All {self.attempts} API request attempts failed')
			raise

	async def _attempt(self, start: date, end: date, from_currency: str, to_currency: str) -> Any:
		task = asyncio.create_task(
			self.provider.fetch_timeseries(start, end, from_currency, to_currency)
		)
		self._inflight.add(task)
		try:
			return await task
		except asyncio.CancelledError:
			current = asyncio.current_task()
			if current is not None and current.cancelling():
				raise
			raise FetchCancelledError('Upstream request was cancelled') from None
		finally:
			self._inflight.discard(task)

	def _log_retry(self, retry_state: RetryCallState) -> None:
		error = retry_state.outcome.exception() if retry_state.outcome else None
		delay = retry_state.next_action.sleep if retry_state.next_action else 0
		logger.warning(
			f'API request attempt {retry_state.attempt_number} failed: {error}. '
			f'Retrying in {delay} seconds...'
		)
