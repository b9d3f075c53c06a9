from domain.models.currency import BASE_CURRENCY, ConversionRequest, RateSnapshot, ValidationResult


class RequestValidator:
	"""Checks a conversion request against the rates that are currently available."""

	def validate(self, request: ConversionRequest, snapshot: RateSnapshot) -> ValidationResult:
		result = ValidationResult()

		if not request.valute or request.nominal is None:
			result.errors.append('Missing required parameters "valute" or "nominal"')

		code = request.currency_code
		if code not in snapshot and code != BASE_CURRENCY:
			result.errors.append(f'Value "{request.valute or ""}" not found in currency list')

		if request.truncated_amount <= 0:
			result.errors.append(
				f'Value "{request.nominal or ""}" must be a number greater than zero'
			)

		return result
