class PersistError(Exception):
    """Raised when a property record cannot be written to the database."""
