from application.services.rate_cache import RateCache
from domain.models.currency import BASE_CURRENCY


class CurrencyService:
	def __init__(self, rate_cache: RateCache):
		self.rate_cache = rate_cache

	async def get_supported_currencies(self) -> list[str]:
		snapshot = await self.rate_cache.get_snapshot()
		return sorted({*snapshot.codes(), BASE_CURRENCY})
