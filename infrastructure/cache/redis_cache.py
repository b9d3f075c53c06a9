import json
from datetime import timedelta

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.currency import CacheError
from domain.models.currency import CurrencyRate, RateSnapshot
from infrastructure.cache.base import SnapshotStore


class RedisSnapshotStore(SnapshotStore):
    """Shares one snapshot between worker processes; Redis expires it."""

    def __init__(self, redis_client: redis.Redis, key: str = "rates:snapshot"):
        self.redis = redis_client
        self.key = key

    async def get(self) -> RateSnapshot | None:
        try:
            data = await self.redis.get(self.key)
        except RedisError as e:
            raise CacheError(f"Redis read failed: {e.__class__.__name__}") from e

        if not data:
            return None

        try:
            rates_dict = json.loads(data)
            return RateSnapshot(
                rates={
                    code: CurrencyRate(
                        code=rate["code"],
                        value=float(rate["value"]),
                        nominal=int(rate["nominal"]),
                    )
                    for code, rate in rates_dict.items()
                }
            )
        except json.JSONDecodeError as e:
            raise CacheError(f"Invalid json data under {self.key}") from e
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise CacheError(f"Malformed snapshot under {self.key}: {e}") from e

    async def set(self, snapshot: RateSnapshot, ttl: timedelta) -> None:
        rates_dict = {
            code: {"code": rate.code, "value": rate.value, "nominal": rate.nominal}
            for code, rate in snapshot.rates.items()
        }
        try:
            await self.redis.setex(self.key, ttl, json.dumps(rates_dict))
        except RedisError as e:
            raise CacheError(f"Redis write failed: {e.__class__.__name__}") from e
