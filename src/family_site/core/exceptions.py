class DatasetError(Exception):
    """Base exception for dataset failures."""


class DatasetLoadError(DatasetError):
    """Raised when a data document cannot be read or parsed."""


class RecordError(DatasetError):
    """Raised when a single record in a document is invalid."""
