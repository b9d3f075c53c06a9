from .base import RateSource
from .cbr import CBRDailyProvider

__all__ = ['RateSource', 'CBRDailyProvider']
