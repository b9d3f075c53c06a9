import logging

import httpx

from domain.exceptions.currency import UpstreamError
from domain.models.currency import TARGET_CURRENCY, CurrencyRate, RateSnapshot
from infrastructure.providers.base import RateSource

logger = logging.getLogger(__name__)


class CBRDailyProvider(RateSource):
	"""Daily rates of the Central Bank of Russia, quoted in RUB."""

	DEFAULT_URL = 'https://www.cbr-xml-daily.ru/daily_json.js'

	def __init__(
		self, url: str = DEFAULT_URL, client: httpx.AsyncClient | None = None, timeout: float = 3.14
	):
		self.url = url
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'cbr-xml-daily'

	async def _request(self) -> dict:
		try:
			response = await self._client.get(self.url)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise UpstreamError(
				f'CBR HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise UpstreamError(f'CBR request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise UpstreamError(f'CBR response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise UpstreamError('CBR response parsing error: expected a JSON object')
		return data

	async def fetch_snapshot(self) -> RateSnapshot:
		logger.debug(f'Fetching rates from {self.url}')
		data = await self._request()

		valute = data.get('Valute')
		if not isinstance(valute, dict):
			raise UpstreamError('CBR response has no "Valute" object')

		rates: dict[str, CurrencyRate] = {}
		try:
			for code, entry in valute.items():
				code = code.upper()
				rates[code] = CurrencyRate(
					code=code,
					value=float(entry['Value']),
					nominal=int(entry.get('Nominal', 1)),
				)
		except (KeyError, TypeError, ValueError, AttributeError) as e:
			raise UpstreamError(f'Malformed rate entry in CBR response: {str(e)}') from e

		usd = rates.get(TARGET_CURRENCY)
		if usd is None or usd.value <= 0:
			raise UpstreamError(f'CBR response has no usable {TARGET_CURRENCY} rate')

		logger.info(f'{self.name} returned {len(rates)} rates')
		return RateSnapshot(rates=rates)

	async def close(self) -> None:
		await self._client.aclose()
