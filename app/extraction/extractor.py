from app.config.settings import Settings
from app.extraction.base import BaseTextExtractor
from app.extraction.docx_adapter import DocxExtractor
from app.extraction.models import (
    ExtractedText,
    ExtractionFailed,
    TextExtracted,
    UploadedDocument,
)
from app.extraction.pdf_placeholder import PdfPlaceholderExtractor
from app.extraction.plain_text import PlainTextExtractor
from app.logging.logger import Log
from app.pdf.factory import PdfLoaderFactory

MIME_PDF = "application/pdf"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MIME_TEXT = "text/plain"


def unsupported_placeholder(name: str) -> str:
    return f"Could not extract text from unsupported file type: {name}"


class DocumentTextExtractor:
    """Dispatches each uploaded document to the extractor for its media type.

    Failures are contained per document: the returned outcome is tagged
    ExtractionFailed and the rest of the batch is unaffected.
    """

    def __init__(self, extractors: dict[str, BaseTextExtractor]) -> None:
        self._extractors = extractors

    def extract(self, document: UploadedDocument) -> ExtractedText:
        Log.info(f"Processing file: {document.name}, type: {document.mime_type}")
        extractor = self._extractors.get(_base_mime_type(document.mime_type))
        if extractor is None:
            Log.warning(
                f"Unsupported file type: {document.mime_type} for file {document.name}"
            )
            return ExtractedText(
                name=document.name,
                outcome=TextExtracted(
                    text=unsupported_placeholder(document.name), placeholder=True
                ),
            )
        try:
            outcome = extractor.extract(document)
        except Exception as exc:
            Log.error(f"Error parsing file {document.name}: {exc}")
            return ExtractedText(name=document.name, outcome=ExtractionFailed(reason=str(exc)))
        Log.info(f"Extracted {len(outcome.text)} chars from {document.name}")
        return ExtractedText(name=document.name, outcome=outcome)

    def extract_all(self, documents: list[UploadedDocument]) -> list[ExtractedText]:
        return [self.extract(document) for document in documents]


def _base_mime_type(mime_type: str) -> str:
    # "text/plain; charset=utf-8" -> "text/plain"
    return mime_type.split(";", 1)[0].strip().lower()


def build_text_extractor(settings: Settings) -> DocumentTextExtractor:
    """Build a DocumentTextExtractor wired with every supported format."""
    return DocumentTextExtractor(
        extractors={
            MIME_TEXT: PlainTextExtractor(),
            MIME_DOCX: DocxExtractor(),
            MIME_PDF: PdfPlaceholderExtractor(PdfLoaderFactory.create(settings)),
        }
    )
