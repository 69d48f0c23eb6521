from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class UsageRecord:
    """One ledger entry, written once per pipeline invocation."""

    id: str
    timestamp: datetime
    cost: float
    user_id: str
    docs_uploaded: int
    reports_generated: int
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UsageTotals:
    total_cost: float = 0.0
    total_docs_uploaded: int = 0
    total_reports_generated: int = 0
