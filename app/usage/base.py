from abc import ABC, abstractmethod

from app.usage.models import UsageRecord


class BaseLedgerStore(ABC):
    """Contract for usage record storage backends."""

    @abstractmethod
    def append(self, record: UsageRecord) -> None:
        """Store a record. Must be atomic with respect to concurrent appends."""

    @abstractmethod
    def records_for(self, user_id: str) -> list[UsageRecord]:
        """Return a snapshot of the user's records in insertion order."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every record for every user."""
