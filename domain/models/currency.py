import math
import re
from dataclasses import dataclass, field

BASE_CURRENCY = 'RUB'
TARGET_CURRENCY = 'USD'

_LEADING_NUMBER = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')


@dataclass(frozen=True)
class CurrencyRate:
    code: str
    value: float  # RUB per `nominal` units of `code`
    nominal: int = 1


@dataclass(frozen=True)
class RateSnapshot:
    rates: dict[str, CurrencyRate]

    def __contains__(self, code: str) -> bool:
        return code in self.rates

    def get(self, code: str) -> CurrencyRate | None:
        return self.rates.get(code)

    def codes(self) -> list[str]:
        return list(self.rates.keys())

    @property
    def usd(self) -> CurrencyRate:
        return self.rates[TARGET_CURRENCY]


def parse_amount(raw: str | None) -> float:
    """Parse the leading numeric part of a query value, 0.0 when there is none."""
    if raw is None:
        return 0.0
    match = _LEADING_NUMBER.match(raw)
    if not match:
        return 0.0
    return float(match.group(0))


@dataclass(frozen=True)
class ConversionRequest:
    valute: str | None
    nominal: str | None

    @property
    def currency_code(self) -> str:
        return (self.valute or '').upper()

    @property
    def amount(self) -> float:
        return parse_amount(self.nominal)

    @property
    def truncated_amount(self) -> int:
        amount = self.amount
        if not math.isfinite(amount):
            return 0
        return int(amount)


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
