import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_summary_service
from api.schemas import SummaryResponse
from application.services import SummaryService
from domain.models.rates import SummaryMode

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api', tags=['summary'])


@router.get(
	'/summary',
	response_model=SummaryResponse,
	status_code=status.HTTP_200_OK,
	summary='Exchange rate series and statistics for a date range',
)
async def get_summary(
	start: Annotated[str, Query(description='First day of the range, YYYY-MM-DD')],
	end: Annotated[str, Query(description='Last day of the range, YYYY-MM-DD')],
	service: Annotated[SummaryService, Depends(get_summary_service)],
	mode: Annotated[SummaryMode, Query(description='"day" includes the daily series, "none" only the summary')] = SummaryMode.DAY,
) -> SummaryResponse:
	result = await service.get_summary(start, end, mode)
	return SummaryResponse.from_result(result)
