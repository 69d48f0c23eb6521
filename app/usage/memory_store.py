import threading

from app.usage.base import BaseLedgerStore
from app.usage.models import UsageRecord


class InMemoryLedgerStore(BaseLedgerStore):
    """Process-lifetime list of records guarded by a lock. Lost on restart."""

    def __init__(self) -> None:
        self._records: list[UsageRecord] = []
        self._lock = threading.Lock()

    def append(self, record: UsageRecord) -> None:
        with self._lock:
            self._records.append(record)

    def records_for(self, user_id: str) -> list[UsageRecord]:
        with self._lock:
            return [r for r in self._records if r.user_id == user_id]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
