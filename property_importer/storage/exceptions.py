class ArchiveError(Exception):
    """Raised when the storage backend rejects a document write."""
