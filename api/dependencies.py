import logging
import time
from datetime import timedelta
from typing import Annotated

from fastapi import Depends, Request
from redis.asyncio import Redis

from application.services import (
	ConversionService,
	CostService,
	CurrencyService,
	RateCache,
	RequestAuditor,
	RequestContext,
	RequestValidator,
)
from config.settings import get_settings
from infrastructure.cache.base import SnapshotStore
from infrastructure.cache.memory_cache import InMemorySnapshotStore
from infrastructure.cache.redis_cache import RedisSnapshotStore
from infrastructure.providers import CBRDailyProvider, RateSource

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	redis_client: Redis | None = None
	store: SnapshotStore | None = None
	provider: RateSource | None = None
	rate_cache: RateCache | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.provider = CBRDailyProvider(url=settings.RATES_URL, timeout=settings.HTTP_TIMEOUT)

	if settings.CACHE_BACKEND == 'redis':
		deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
		deps.store = RedisSnapshotStore(deps.redis_client, key=settings.REDIS_CACHE_KEY)
	else:
		deps.store = InMemorySnapshotStore()

	deps.rate_cache = RateCache(
		source=deps.provider,
		store=deps.store,
		ttl=timedelta(seconds=settings.CACHE_TTL),
	)
	logger.info(f'Dependencies initialized ({settings.CACHE_BACKEND} cache, ttl={settings.CACHE_TTL}s)')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
	if deps.redis_client:
		await deps.redis_client.aclose()

	deps.provider = deps.store = deps.rate_cache = deps.redis_client = None
	logger.info('Cleanup complete')


def get_rate_cache() -> RateCache:
	if deps.rate_cache is None:
		raise RuntimeError('Rate cache not initialized')
	return deps.rate_cache


def get_request_auditor() -> RequestAuditor:
	return RequestAuditor()


def get_request_context(request: Request) -> RequestContext:
	query = request.url.query
	return RequestContext(
		request_uri=f'{request.url.path}?{query}' if query else request.url.path,
		started_at=getattr(request.state, 'started_at', None) or time.time(),
		user_agent=request.headers.get('user-agent'),
		client_ip=request.client.host if request.client else None,
	)


def get_cost_service(
	rate_cache: Annotated[RateCache, Depends(get_rate_cache)],
) -> CostService:
	return CostService(
		rate_cache=rate_cache,
		validator=RequestValidator(),
		converter=ConversionService(),
	)


def get_currency_service(
	rate_cache: Annotated[RateCache, Depends(get_rate_cache)],
) -> CurrencyService:
	return CurrencyService(rate_cache=rate_cache)
