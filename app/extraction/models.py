from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedDocument:
    """A file received in one upload request. Never stored."""

    name: str
    mime_type: str
    raw_bytes: bytes


@dataclass(frozen=True)
class TextExtracted:
    """Extraction produced text, or a fixed placeholder standing in for it."""

    text: str
    placeholder: bool = False


@dataclass(frozen=True)
class ExtractionFailed:
    """Extraction raised; the document stays in the batch with this reason."""

    reason: str


ExtractionOutcome = TextExtracted | ExtractionFailed


@dataclass(frozen=True)
class ExtractedText:
    """Extraction outcome for one document, keyed by its file name."""

    name: str
    outcome: ExtractionOutcome

    @property
    def content(self) -> str:
        """Text as it appears in the prompt, failures rendered in-band."""
        if isinstance(self.outcome, ExtractionFailed):
            return f"Error parsing file {self.name}: {self.outcome.reason}"
        return self.outcome.text

    @property
    def has_text(self) -> bool:
        return (
            isinstance(self.outcome, TextExtracted)
            and not self.outcome.placeholder
            and bool(self.outcome.text.strip())
        )
