from app.extraction.extractor import DocumentTextExtractor
from app.logging.logger import Log
from app.processor.exceptions import ConfigurationError, UploadValidationError
from app.processor.pipeline import PipelineContext, PipelineStep
from app.report.detector import ConflictDetector
from app.report.exceptions import ResponseFormatError
from app.usage.ledger import UsageLedger


class CheckConfigurationStep(PipelineStep):
    def __init__(self, detector: ConflictDetector | None) -> None:
        self._detector = detector

    def run(self, context: PipelineContext) -> PipelineContext:
        if self._detector is None:
            raise ConfigurationError(
                "Server configuration error: API key is missing or invalid."
            )
        return context


class ValidateUploadStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.documents:
            raise UploadValidationError("No documents uploaded.")
        Log.info(f"Found {len(context.documents)} documents")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: DocumentTextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted = self._text_extractor.extract_all(context.documents)
        if not any(doc.has_text for doc in context.extracted):
            Log.warning(
                "No meaningful text extracted from any document; "
                "continuing with placeholder content"
            )
        return context


class DetectConflictsStep(PipelineStep):
    def __init__(self, detector: ConflictDetector) -> None:
        self._detector = detector

    def run(self, context: PipelineContext) -> PipelineContext:
        context.report = self._detector.detect(context.extracted)
        context.reports_generated = 1 if context.report.has_conflicts else 0
        return context


class RecordUsageStep(PipelineStep):
    def __init__(self, ledger: UsageLedger) -> None:
        self._ledger = ledger

    def run(self, context: PipelineContext) -> PipelineContext:
        doc_count = len(context.documents)
        self._ledger.record(
            context.user_id,
            doc_count,
            context.reports_generated,
            {"documentCount": doc_count},
        )
        return context


class RecordFailedUsageStep(PipelineStep):
    """Writes the zero-yield ledger entry for a failed invocation."""

    def __init__(self, ledger: UsageLedger) -> None:
        self._ledger = ledger

    def run(self, context: PipelineContext) -> PipelineContext:
        error = context.error
        doc_count = len(context.documents)
        if isinstance(error, ConfigurationError):
            self._ledger.record(
                context.user_id, 0, 0, {"error": "API key missing at client init"}
            )
        elif isinstance(error, ResponseFormatError):
            self._ledger.record(
                context.user_id,
                doc_count,
                0,
                {"documentCount": doc_count, "error": "invalid JSON"},
            )
        else:
            message = str(error) if error is not None else ""
            self._ledger.record(
                context.user_id,
                doc_count,
                0,
                {"error": message or "Unknown error during upload processing"},
            )
        return context
