from app.extraction.base import BaseTextExtractor
from app.extraction.models import TextExtracted, UploadedDocument
from app.logging.logger import Log
from app.pdf.base import BasePdfLoader


def pdf_placeholder(name: str) -> str:
    return f"[PDF Content from {name} - Full text extraction not implemented]"


class PdfPlaceholderExtractor(BaseTextExtractor):
    """Validates a PDF with the configured loader and substitutes a placeholder.

    PDF text extraction is a known limitation: the document content is never
    read, only its structure is checked.
    """

    def __init__(self, pdf_loader: BasePdfLoader) -> None:
        self._pdf_loader = pdf_loader

    def extract(self, document: UploadedDocument) -> TextExtracted:
        page_count = self._pdf_loader.load(document.raw_bytes)
        Log.info(f"Loaded PDF {document.name} ({page_count} pages), using placeholder text")
        return TextExtracted(text=pdf_placeholder(document.name), placeholder=True)
