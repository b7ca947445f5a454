class RemError(Exception):
    """Base exception for all remcli errors."""
    pass

class RecoverableError(RemError):
    """An error that can be recovered from without data loss."""
    pass

class FatalError(RemError):
    """An error that requires application termination or major intervention."""
    pass

class CorruptionError(FatalError):
    """Corrupted Data Error - from syntax errors in data formats, to just unknown data"""
    pass

class MalformedRecordError(CorruptionError):
    """A task record whose metadata block is missing or does not parse."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path

class FileOperationError(RecoverableError):
    """File operation failed but can be retried."""
    pass

class TaskNotFoundError(RecoverableError):
    """ No loaded task matches the requested id """
    pass
