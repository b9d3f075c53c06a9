# nosec B101


import pytest
import json
from datetime import timedelta
from unittest.mock import AsyncMock

from redis.exceptions import ConnectionError as RedisConnectionError

from infrastructure.cache.redis_cache import RedisSnapshotStore
from domain.models.currency import CurrencyRate, RateSnapshot
from domain.exceptions.currency import CacheError, UpstreamError


def make_snapshot():
    return RateSnapshot(rates={
        'USD': CurrencyRate(code='USD', value=75.0, nominal=1),
        'JPY': CurrencyRate(code='JPY', value=52.5, nominal=100),
    })


@pytest.mark.asyncio
async def test_get_cache_hit_returns_snapshot():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = json.dumps({
        'USD': {'code': 'USD', 'value': 75.0, 'nominal': 1},
        'EUR': {'code': 'EUR', 'value': 90.0, 'nominal': 1},
    })

    store = RedisSnapshotStore(redis_client=mock_redis)
    result = await store.get()

    assert isinstance(result, RateSnapshot)
    assert result.usd.value == 75.0
    assert result.get('EUR') == CurrencyRate(code='EUR', value=90.0, nominal=1)

    mock_redis.get.assert_called_once_with('rates:snapshot')


@pytest.mark.asyncio
async def test_get_cache_miss_returns_none():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = None

    store = RedisSnapshotStore(redis_client=mock_redis)

    assert await store.get() is None


@pytest.mark.asyncio
async def test_get_uses_configured_key():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = None

    store = RedisSnapshotStore(redis_client=mock_redis, key='cbr:daily')
    await store.get()

    mock_redis.get.assert_called_once_with('cbr:daily')


# ============================================================================
# TEST: get() - Edge Cases and Error Scenarios
# ============================================================================

@pytest.mark.asyncio
async def test_get_malformed_json_raises_cache_error():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = "{ invalid json }"

    store = RedisSnapshotStore(redis_client=mock_redis)

    with pytest.raises(CacheError) as exc_info:
        await store.get()

    assert 'Invalid json data' in str(exc_info.value)


@pytest.mark.asyncio
async def test_get_incomplete_entry_raises_cache_error():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = json.dumps({'USD': {'code': 'USD'}})

    store = RedisSnapshotStore(redis_client=mock_redis)

    with pytest.raises(CacheError):
        await store.get()


@pytest.mark.asyncio
async def test_get_redis_failure_is_an_upstream_error():
    mock_redis = AsyncMock()
    mock_redis.get.side_effect = RedisConnectionError('Connection refused')

    store = RedisSnapshotStore(redis_client=mock_redis)

    with pytest.raises(UpstreamError) as exc_info:
        await store.get()

    assert isinstance(exc_info.value, CacheError)
    assert 'Redis read failed' in str(exc_info.value)


# ============================================================================
# TEST: set() - Cache Write Scenarios
# ============================================================================

@pytest.mark.asyncio
async def test_set_serializes_and_stores_with_ttl():
    mock_redis = AsyncMock()
    store = RedisSnapshotStore(redis_client=mock_redis)

    await store.set(make_snapshot(), timedelta(seconds=60))

    mock_redis.setex.assert_called_once()

    call_args = mock_redis.setex.call_args
    key = call_args[0][0]
    ttl = call_args[0][1]
    stored_data = call_args[0][2]

    assert key == 'rates:snapshot'
    assert ttl == timedelta(seconds=60)

    stored_dict = json.loads(stored_data)
    assert stored_dict['USD'] == {'code': 'USD', 'value': 75.0, 'nominal': 1}
    assert stored_dict['JPY'] == {'code': 'JPY', 'value': 52.5, 'nominal': 100}


@pytest.mark.asyncio
async def test_set_redis_failure_raises_cache_error():
    mock_redis = AsyncMock()
    mock_redis.setex.side_effect = RedisConnectionError('Connection refused')

    store = RedisSnapshotStore(redis_client=mock_redis)

    with pytest.raises(CacheError) as exc_info:
        await store.set(make_snapshot(), timedelta(seconds=60))

    assert 'Redis write failed' in str(exc_info.value)


@pytest.mark.asyncio
async def test_set_then_get_returns_equal_snapshot():
    mock_redis = AsyncMock()
    store = RedisSnapshotStore(redis_client=mock_redis)
    original = make_snapshot()

    await store.set(original, timedelta(seconds=60))

    mock_redis.get.return_value = mock_redis.setex.call_args[0][2]
    assert await store.get() == original
