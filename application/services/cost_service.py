import logging
import math

from application.services.conversion_service import ConversionService
from application.services.rate_cache import RateCache
from application.services.validation_service import RequestValidator
from domain.exceptions.currency import InvalidRequestError
from domain.models.currency import ConversionRequest

logger = logging.getLogger(__name__)


class CostService:
	def __init__(self, rate_cache: RateCache, validator: RequestValidator, converter: ConversionService):
		self.rate_cache = rate_cache
		self.validator = validator
		self.converter = converter

	async def get_cost(self, request: ConversionRequest) -> dict:
		# validation needs the currency list, so even a malformed request reads the rates
		snapshot = await self.rate_cache.get_snapshot()

		result = self.validator.validate(request, snapshot)
		if not result.is_valid:
			logger.info(f'Rejected conversion request: {result.errors}')
			raise InvalidRequestError(result.errors)

		cost = self.converter.convert(request.amount, request.currency_code, snapshot)
		if cost is not None and not math.isfinite(cost):
			errors = [f'Value "{request.nominal}" is too large to convert']
			logger.info(f'Rejected conversion request: {errors}')
			raise InvalidRequestError(errors)

		return {
			'cost': cost,
			'currency': request.currency_code,
		}
