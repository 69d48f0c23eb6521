from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.extraction.models import ExtractedText, UploadedDocument
from app.report.models import ConflictReport


@dataclass(slots=True)
class PipelineContext:
    user_id: str
    documents: list[UploadedDocument] = field(default_factory=list)
    extracted: list[ExtractedText] = field(default_factory=list)
    report: ConflictReport = field(default_factory=ConflictReport)
    reports_generated: int = 0
    error: Exception | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
