from app.extraction.exceptions import ExtractionError


class PdfLoadError(ExtractionError):
    """Raised when PDF bytes cannot be opened by the configured engine."""
