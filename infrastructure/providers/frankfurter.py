from datetime import date
from typing import Any

import httpx

from domain.exceptions.rates import ProviderError


class FrankfurterProvider:
	DEFAULT_BASE_URL = 'https://api.frankfurter.dev/v1'

	def __init__(
		self,
		base_url: str = DEFAULT_BASE_URL,
		client: httpx.AsyncClient | None = None,
		timeout: float = 10,
	):
		self.base_url = base_url.rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'frankfurter'

	def _build_timeseries_url(self, start: date, end: date) -> str:
		return f'{self.base_url}/{start.isoformat()}..{end.isoformat()}'

	async def fetch_timeseries(
		self, start: date, end: date, from_currency: str, to_currency: str
	) -> Any:
		"""Single attempt at the time-series endpoint. Retrying is the caller's job."""
		url = self._build_timeseries_url(start, end)
		params = {'from': from_currency, 'to': to_currency}

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			return response.json()

		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'Frankfurter HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'Frankfurter request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise ProviderError(f'Frankfurter response parsing error: {str(e)}') from e

	async def close(self) -> None:
		await self._client.aclose()
