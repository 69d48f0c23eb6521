from abc import ABC, abstractmethod

from app.extraction.models import TextExtracted, UploadedDocument


class BaseTextExtractor(ABC):
    """Contract for format-specific text extractors."""

    @abstractmethod
    def extract(self, document: UploadedDocument) -> TextExtracted:
        """Extract text from one uploaded document.

        Raises:
            ExtractionError: if the document cannot be read in this format.
        """
