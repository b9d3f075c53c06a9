from .conversion_service import ConversionService
from .cost_service import CostService
from .currency_service import CurrencyService
from .rate_cache import RateCache
from .request_auditor import RequestAuditor, RequestContext
from .validation_service import RequestValidator

__all__ = [
	'ConversionService',
	'CostService',
	'CurrencyService',
	'RateCache',
	'RequestAuditor',
	'RequestContext',
	'RequestValidator',
]
