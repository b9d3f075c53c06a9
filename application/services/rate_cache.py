import asyncio
import logging
from datetime import timedelta

from domain.models.currency import RateSnapshot
from infrastructure.cache.base import SnapshotStore
from infrastructure.providers.base import RateSource

logger = logging.getLogger(__name__)


class RateCache:
	"""
	Cache-aside access to the current rate snapshot.

	A live snapshot in the store is returned as is. Otherwise the source is
	queried once and the result is stored for ``ttl``. A failed fetch leaves
	the store untouched and the ``UpstreamError`` reaches the caller.
	"""

	def __init__(self, source: RateSource, store: SnapshotStore, ttl: timedelta = timedelta(seconds=60)):
		self.source = source
		self.store = store
		self.ttl = ttl
		# serializes check-and-refresh so concurrent misses share one fetch
		self._lock = asyncio.Lock()

	async def get_snapshot(self) -> RateSnapshot:
		async with self._lock:
			snapshot = await self.store.get()
			if snapshot is not None:
				logger.debug('Rate snapshot cache hit')
				return snapshot

			logger.info(f'Rate snapshot cache miss, fetching from {self.source.name}')
			snapshot = await self.source.fetch_snapshot()
			await self.store.set(snapshot, self.ttl)
			return snapshot
