class ExchangeRateError(Exception):
	pass


class InvalidDateFormatError(ExchangeRateError):
	def __init__(self, message: str = 'Invalid date format. Use YYYY-MM-DD'):
		super().__init__(message)


class InvalidRangeError(ExchangeRateError):
	def __init__(self, message: str = 'start must be <= end'):
		super().__init__(message)


class ProviderError(ExchangeRateError):
	pass


class FallbackError(ExchangeRateError):
	pass


class FetchCancelledError(ExchangeRateError):
	pass


class RatesUnavailableError(ExchangeRateError):
	"""Raised when both the retried upstream fetch and the fallback snapshot failed."""

	def __init__(self, upstream_error: Exception, fallback_error: Exception):
		self.upstream_error = upstream_error
		self.fallback_error = fallback_error
		super().__init__(
			'Failed to fetch exchange rates from API and fallback. '
			f'API error: {upstream_error}; fallback error: {fallback_error}'
		)
