from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.api.errors import error_response
from app.api.schemas import (
    ConflictResults,
    HealthResponse,
    UploadResponse,
    UsageRecordOut,
    UsageResponse,
)
from app.config.settings import Settings
from app.extraction.models import UploadedDocument
from app.logging.logger import Log
from app.processor.processor import Processor
from app.usage.ledger import UsageLedger

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_processor(request: Request) -> Processor:
    return request.app.state.processor


def get_ledger(request: Request) -> UsageLedger:
    return request.app.state.ledger


def _to_uploaded(file: UploadFile) -> UploadedDocument:
    return UploadedDocument(
        name=file.filename or "",
        mime_type=file.content_type or "",
        raw_bytes=file.file.read(),
    )


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")


@router.post("/api/upload", response_model=UploadResponse)
def upload(
    settings: Annotated[Settings, Depends(get_settings)],
    processor: Annotated[Processor, Depends(get_processor)],
    documents: Annotated[list[UploadFile] | None, File()] = None,
) -> UploadResponse:
    """Extract text from the uploaded files and return the model's conflict report."""
    Log.info("Upload request received")
    uploaded = [_to_uploaded(f) for f in documents or [] if f.filename]
    result = processor.process(settings.default_user_id, uploaded)
    return UploadResponse(
        message="Files processed successfully",
        results=ConflictResults.from_report(result.report),
    )


@router.get("/api/usage", response_model=UsageResponse)
def usage(
    settings: Annotated[Settings, Depends(get_settings)],
    ledger: Annotated[UsageLedger, Depends(get_ledger)],
):
    try:
        totals = ledger.totals(settings.default_user_id)
    except Exception as exc:
        Log.error(f"Error fetching usage stats: {exc}")
        return error_response(500, "Failed to fetch usage statistics.")
    return UsageResponse.from_totals(totals)


@router.get("/api/usage/history", response_model=list[UsageRecordOut])
def usage_history(
    settings: Annotated[Settings, Depends(get_settings)],
    ledger: Annotated[UsageLedger, Depends(get_ledger)],
) -> list[UsageRecordOut]:
    return [UsageRecordOut.from_record(r) for r in ledger.history(settings.default_user_id)]
