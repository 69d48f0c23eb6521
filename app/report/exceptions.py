class ResponseFormatError(Exception):
    """Raised when the model reply is not a usable JSON conflict report."""

    def __init__(self, message: str, raw_response: str) -> None:
        super().__init__(message)
        self.raw_response = raw_response
