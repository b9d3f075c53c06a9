from abc import ABC, abstractmethod
from datetime import timedelta

from domain.models.currency import RateSnapshot


class SnapshotStore(ABC):
    """Holds at most one rate snapshot until its TTL runs out."""

    @abstractmethod
    async def get(self) -> RateSnapshot | None:
        ...

    @abstractmethod
    async def set(self, snapshot: RateSnapshot, ttl: timedelta) -> None:
        ...
