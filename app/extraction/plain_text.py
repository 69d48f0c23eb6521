from app.extraction.base import BaseTextExtractor
from app.extraction.models import TextExtracted, UploadedDocument


class PlainTextExtractor(BaseTextExtractor):
    """Decodes text/plain uploads as UTF-8."""

    def extract(self, document: UploadedDocument) -> TextExtracted:
        return TextExtracted(text=document.raw_bytes.decode("utf-8-sig", errors="replace"))
