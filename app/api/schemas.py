from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.report.models import ConflictReport
from app.usage.models import UsageRecord, UsageTotals


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConflictOut(BaseModel):
    document1: str
    document2: str
    description: str
    suggestion: str


class ConflictResults(BaseModel):
    conflicts: list[ConflictOut]

    @classmethod
    def from_report(cls, report: ConflictReport) -> "ConflictResults":
        return cls(
            conflicts=[
                ConflictOut(
                    document1=c.document1,
                    document2=c.document2,
                    description=c.description,
                    suggestion=c.suggestion,
                )
                for c in report.conflicts
            ]
        )


class UploadResponse(BaseModel):
    message: str
    results: ConflictResults


class ErrorResponse(CamelModel):
    error: str
    raw_response: str | None = None


class UsageResponse(CamelModel):
    total_cost: float
    total_docs_uploaded: int
    total_reports_generated: int

    @classmethod
    def from_totals(cls, totals: UsageTotals) -> "UsageResponse":
        return cls(
            total_cost=totals.total_cost,
            total_docs_uploaded=totals.total_docs_uploaded,
            total_reports_generated=totals.total_reports_generated,
        )


class UsageRecordOut(CamelModel):
    id: str
    timestamp: datetime
    cost: float
    user_id: str
    docs_uploaded: int
    reports_generated: int
    details: dict[str, Any]

    @classmethod
    def from_record(cls, record: UsageRecord) -> "UsageRecordOut":
        return cls(
            id=record.id,
            timestamp=record.timestamp,
            cost=record.cost,
            user_id=record.user_id,
            docs_uploaded=record.docs_uploaded,
            reports_generated=record.reports_generated,
            details=record.details,
        )


class HealthResponse(BaseModel):
    status: str
