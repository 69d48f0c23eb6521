from app.config.settings import Settings
from app.extraction.extractor import build_text_extractor
from app.extraction.models import UploadedDocument
from app.llm.exceptions import GenerationError
from app.llm.factory import GenerationClientFactory
from app.logging.logger import Log
from app.processor.exceptions import (
    ConfigurationError,
    UnknownProcessingError,
    UploadValidationError,
)
from app.processor.models import ProcessorResult
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    CheckConfigurationStep,
    DetectConflictsStep,
    ExtractTextStep,
    RecordFailedUsageStep,
    RecordUsageStep,
    ValidateUploadStep,
)
from app.report.detector import ConflictDetector
from app.report.exceptions import ResponseFormatError
from app.usage.ledger import UsageLedger


class Processor:
    """Runs the ingestion pipeline for one upload request.

    Pipeline: check config -> validate -> extract -> detect -> record usage.
    Every invocation writes exactly one usage record, except an empty upload
    which is rejected before any side effect.
    """

    PROPAGATED_ERRORS: tuple[type[Exception], ...] = (
        ConfigurationError,
        GenerationError,
        ResponseFormatError,
    )

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, user_id: str, documents: list[UploadedDocument]) -> ProcessorResult:
        Log.info(f"Processing upload of {len(documents)} documents for user {user_id}")
        context = PipelineContext(user_id=user_id, documents=list(documents))
        try:
            for step in self._steps:
                context = step.run(context)
        except UploadValidationError:
            Log.warning("No documents uploaded")
            raise
        except self.PROPAGATED_ERRORS as exc:
            Log.error(f"Upload processing failed: {exc}")
            context.error = exc
            self._failed_step.run(context)
            raise
        except Exception as exc:
            Log.exception(f"Unexpected error processing upload: {exc}")
            context.error = exc
            self._failed_step.run(context)
            raise UnknownProcessingError(str(exc)) from exc

        return ProcessorResult(
            report=context.report,
            docs_uploaded=len(context.documents),
            reports_generated=context.reports_generated,
        )


def build_processor(settings: Settings, ledger: UsageLedger) -> Processor:
    """Build a Processor with all required adapters."""
    client = GenerationClientFactory.create(settings)
    detector = (
        ConflictDetector(
            client=client,
            model=settings.llm_model_name,
            temperature=settings.llm_temperature,
        )
        if client is not None
        else None
    )
    steps: list[PipelineStep] = [
        CheckConfigurationStep(detector),
        ValidateUploadStep(),
        ExtractTextStep(build_text_extractor(settings)),
    ]
    if detector is not None:
        steps.append(DetectConflictsStep(detector))
    steps.append(RecordUsageStep(ledger))
    return Processor(steps=steps, failed_step=RecordFailedUsageStep(ledger))
