class ExtractionError(Exception):
    """Raised when text cannot be extracted from a single uploaded document."""
