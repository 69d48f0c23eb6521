import uuid
from datetime import datetime, timezone
from typing import Any

from app.logging.logger import Log
from app.usage.base import BaseLedgerStore
from app.usage.models import UsageRecord, UsageTotals

DEFAULT_COST_PER_CALL = 0.01


class UsageLedger:
    """Append-only usage log with per-user aggregate queries.

    Aggregates are linear folds over the user's records with no caching.
    """

    def __init__(self, store: BaseLedgerStore, cost_per_call: float = DEFAULT_COST_PER_CALL) -> None:
        self._store = store
        self._cost_per_call = cost_per_call

    def record(
        self,
        user_id: str,
        docs_uploaded: int,
        reports_generated: int,
        details: dict[str, Any] | None = None,
    ) -> UsageRecord:
        record = UsageRecord(
            id=f"usage-{uuid.uuid4().hex}",
            timestamp=datetime.now(timezone.utc),
            cost=self._cost_per_call,
            user_id=user_id,
            docs_uploaded=docs_uploaded,
            reports_generated=reports_generated,
            details=dict(details or {}),
        )
        self._store.append(record)
        Log.info(
            f"Usage recorded for user {user_id}: Cost ${record.cost:.2f}, "
            f"Docs: {docs_uploaded}, Reports: {reports_generated}"
        )
        return record

    def history(self, user_id: str) -> list[UsageRecord]:
        return self._store.records_for(user_id)

    def total_cost(self, user_id: str) -> float:
        return sum((r.cost for r in self.history(user_id)), 0.0)

    def total_docs_uploaded(self, user_id: str) -> int:
        return sum(r.docs_uploaded for r in self.history(user_id))

    def total_reports_generated(self, user_id: str) -> int:
        return sum(r.reports_generated for r in self.history(user_id))

    def totals(self, user_id: str) -> UsageTotals:
        """All three aggregates computed from a single snapshot."""
        records = self.history(user_id)
        return UsageTotals(
            total_cost=sum((r.cost for r in records), 0.0),
            total_docs_uploaded=sum(r.docs_uploaded for r in records),
            total_reports_generated=sum(r.reports_generated for r in records),
        )

    def reset(self) -> None:
        self._store.clear()
        Log.info("Usage history cleared")
