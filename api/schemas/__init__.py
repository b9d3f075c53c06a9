from .responses import CostResponse, ErrorResponse, SupportedCurrenciesResponse

__all__ = [
	'CostResponse',
	'ErrorResponse',
	'SupportedCurrenciesResponse',
]
