from typing import Optional


class StorageError(Exception):
    """Base class for every failure the file operations can report."""

    def __init__(self, name: Optional[str], message: str) -> None:
        self.name = name
        super().__init__(message)


class StreamError(StorageError):
    """The request body could not be read to the end."""

    def __init__(self, reason: str) -> None:
        super().__init__(None, f"request body stream failed: {reason}")


class CreateError(StorageError):
    """The file could not be created or opened for writing."""

    def __init__(self, name: str, cause: Exception) -> None:
        self.cause = cause
        super().__init__(name, f"cannot create {name!r}: {cause}")


class WriteError(StorageError):
    """The file was opened but the content could not be written."""

    def __init__(self, name: str, cause: Exception) -> None:
        self.cause = cause
        super().__init__(name, f"cannot write {name!r}: {cause}")


class ExhaustedRetries(StorageError):
    """No free generated name was found within the attempt cap."""

    def __init__(self, prefix: str, attempts: int) -> None:
        self.prefix = prefix
        self.attempts = attempts
        super().__init__(None, f"no free name for prefix {prefix!r} after {attempts} attempts")


class NotFound(StorageError):
    """The file to read or delete is absent or unreadable."""

    def __init__(self, name: str, cause: Optional[Exception] = None) -> None:
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(name, f"{name!r} not found{detail}")
