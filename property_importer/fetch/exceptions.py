class FetchError(Exception):
    """Raised when document bytes cannot be retrieved from their location."""
