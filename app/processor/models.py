from dataclasses import dataclass

from app.report.models import ConflictReport


@dataclass(frozen=True)
class ProcessorResult:
    """Outcome of a successful pipeline invocation."""

    report: ConflictReport
    docs_uploaded: int
    reports_generated: int
