class ParseError(Exception):
    """Raised when PDF bytes cannot be parsed into page text."""
