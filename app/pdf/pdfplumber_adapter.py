import io

import pdfplumber

from app.pdf.base import BasePdfLoader
from app.pdf.exceptions import PdfLoadError


class PdfPlumberAdapter(BasePdfLoader):
    """Validates PDF structure using pdfplumber."""

    def load(self, pdf_bytes: bytes) -> int:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return len(pdf.pages)
        except Exception as exc:
            raise PdfLoadError(f"pdfplumber could not load PDF: {exc}") from exc
