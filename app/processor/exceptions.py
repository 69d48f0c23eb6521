class ProcessorError(Exception):
    """Base exception for all pipeline-level errors."""


class ConfigurationError(ProcessorError):
    """Raised when no generation client is configured (missing API key)."""


class UploadValidationError(ProcessorError):
    """Raised when a request carries no documents."""


class UnknownProcessingError(ProcessorError):
    """Raised in place of any unexpected failure during processing."""
