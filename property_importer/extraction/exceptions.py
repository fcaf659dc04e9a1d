class ExtractionError(Exception):
    """Raised when a structured property record cannot be obtained from the model."""


class ExtractionValidationError(ExtractionError):
    """Raised when the model response does not have the expected structure."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
