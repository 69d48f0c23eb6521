from abc import ABC, abstractmethod


class BasePdfLoader(ABC):
    """Contract for PDF loaders that open and validate a document."""

    @abstractmethod
    def load(self, pdf_bytes: bytes) -> int:
        """Open the PDF and return its page count.

        Text is not extracted; loading only proves the bytes are a readable PDF.

        Raises:
            PdfLoadError: if the bytes cannot be opened as a PDF.
        """
