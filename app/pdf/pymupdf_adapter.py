import pymupdf

from app.pdf.base import BasePdfLoader
from app.pdf.exceptions import PdfLoadError


class PyMuPdfAdapter(BasePdfLoader):
    """Validates PDF structure using PyMuPDF."""

    def load(self, pdf_bytes: bytes) -> int:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return doc.page_count
        except Exception as exc:
            raise PdfLoadError(f"pymupdf could not load PDF: {exc}") from exc
