from abc import ABC, abstractmethod

from domain.models.currency import RateSnapshot


class RateSource(ABC):
    """Network boundary that produces a fresh rate snapshot on every call."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def fetch_snapshot(self) -> RateSnapshot:
        ...

    async def close(self) -> None:
        """Release any network resources held by the source."""
