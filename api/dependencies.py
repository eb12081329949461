import logging

import httpx

from application.services import RetryingFetcher, SummaryService
from config.settings import Settings, get_settings
from infrastructure.cache.memory_cache import MemoryCache
from infrastructure.fallback.snapshot import SnapshotLoader
from infrastructure.providers import FrankfurterProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide dependencies, built once per app lifespan."""

	cache: MemoryCache | None = None
	http_client: httpx.AsyncClient | None = None
	provider: FrankfurterProvider | None = None
	fetcher: RetryingFetcher | None = None
	summary_service: SummaryService | None = None


deps = AppDependencies()


def init_dependencies(settings: Settings | None = None) -> None:
	"""Initialize all dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = settings or get_settings()

	deps.cache = MemoryCache()
	deps.http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.REQUEST_TIMEOUT_SECONDS))
	deps.provider = FrankfurterProvider(base_url=settings.FRANK_API_URL, client=deps.http_client)
	deps.fetcher = RetryingFetcher(
		provider=deps.provider,
		fallback=SnapshotLoader(settings.FALLBACK_FILE),
		cache=deps.cache,
		attempts=settings.RETRY_ATTEMPTS,
		backoff=settings.RETRY_BACKOFF,
		cache_ttl=settings.CACHE_TTL_SECONDS,
	)
	deps.summary_service = SummaryService(
		fetcher=deps.fetcher,
		from_currency=settings.FROM_CURRENCY,
		to_currency=settings.TO_CURRENCY,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.fetcher:
		deps.fetcher.cancel()
	if deps.provider:
		await deps.provider.close()
	if deps.cache:
		deps.cache.clear()

	deps.cache = None
	deps.http_client = None
	deps.provider = None
	deps.fetcher = None
	deps.summary_service = None
	logger.info('Cleanup complete')


def get_summary_service() -> SummaryService:
	if deps.summary_service is None:
		raise RuntimeError('Summary service not initialized')
	return deps.summary_service
