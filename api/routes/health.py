from fastapi import APIRouter, status

from api.schemas import HealthResponse

router = APIRouter(prefix='/api', tags=['health'])


@router.get(
	'/health',
	response_model=HealthResponse,
	status_code=status.HTTP_200_OK,
	summary='Liveness check',
)
async def health_check() -> HealthResponse:
	return HealthResponse(status='ok')
