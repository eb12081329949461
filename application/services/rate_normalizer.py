import logging
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from domain.models.rates import RateMap

logger = logging.getLogger(__name__)

_RATE_VALUE = TypeAdapter(Annotated[float, Field(strict=True, allow_inf_nan=False)])


class RatesPayload(BaseModel):
	"""Upstream/fallback payload. Everything but ``rates`` is ignored."""

	model_config = ConfigDict(extra='ignore')

	rates: dict[str, Any] = Field(default_factory=dict)


class RateNormalizer:
	def __init__(self, quote_currency: str):
		self.quote_currency = quote_currency

	def normalize(self, payload: Any) -> RateMap:
		try:
			parsed = RatesPayload.model_validate(payload)
		except ValidationError as e:
			logger.warning(f'Malformed rates payload, treating as empty: {e.error_count()} error(s)')
			return {}

		rate_map: RateMap = {}
		for day, quotes in parsed.rates.items():
			rate = self._extract_rate(quotes)
			if rate is not None:
				rate_map[day] = rate

		return rate_map

	def _extract_rate(self, quotes: Any) -> float | None:
		if not isinstance(quotes, Mapping) or self.quote_currency not in quotes:
			return None
		try:
			return _RATE_VALUE.validate_python(quotes[self.quote_currency])
		except ValidationError:
			return None
