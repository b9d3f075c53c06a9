from domain.models.currency import BASE_CURRENCY, RateSnapshot


class ConversionService:
	def convert(self, nominal: float, currency_code: str, snapshot: RateSnapshot) -> float | None:
		"""USD value of ``nominal`` units of ``currency_code``; expects a validated request."""
		code = currency_code.upper()
		usd_value = snapshot.usd.value

		rate = snapshot.get(code)
		if rate is not None:
			return rate.value * nominal / usd_value
		if code == BASE_CURRENCY:
			# the source quotes everything in RUB, so RUB itself is not listed
			return nominal / usd_value
		return None
