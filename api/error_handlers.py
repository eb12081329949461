import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.exceptions.rates import (
	FetchCancelledError,
	InvalidDateFormatError,
	InvalidRangeError,
	RatesUnavailableError,
)

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
	parts = []
	for error in exc.errors():
		field = '.'.join(str(loc) for loc in error.get('loc', ()) if loc != 'query')
		parts.append(f'{field}: {error.get("msg")}' if field else str(error.get('msg')))
	return '; '.join(parts) or 'Invalid request parameters'


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(RequestValidationError)
	async def request_validation_handler(request: Request, exc: RequestValidationError):
		return JSONResponse(status_code=400, content={'detail': _describe_validation_error(exc)})

	@app.exception_handler(InvalidDateFormatError)
	async def invalid_date_handler(request: Request, exc: InvalidDateFormatError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(InvalidRangeError)
	async def invalid_range_handler(request: Request, exc: InvalidRangeError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(RatesUnavailableError)
	async def rates_unavailable_handler(request: Request, exc: RatesUnavailableError):
		logger.error(f'Summary request failed: {exc}')
		return JSONResponse(status_code=503, content={'detail': str(exc)})

	@app.exception_handler(FetchCancelledError)
	async def fetch_cancelled_handler(request: Request, exc: FetchCancelledError):
		logger.warning(f'Summary request cancelled: {exc}')
		return JSONResponse(status_code=503, content={'detail': str(exc)})
