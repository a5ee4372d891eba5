"""
This module defines the errors raised while reading a stream, and the check used to tell an
expired shard iterator apart from every other failure of the remote service.

Only an expired iterator is recovered from automatically. Everything else stops the shard
reader that hit it, and reaches the owner of the `StreamReader` as a `ShardTerminatedError`.
"""

from botocore.exceptions import ClientError

from .constants import ITERATOR_EXPIRED_CODE


class ReaderError(RuntimeError):
    """Base class for errors raised by the stream reader, carrying a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RecordDecodeError(ValueError):
    """
    RecordDecodeError is raised when the payload of a record is not a valid envelope.
    It aborts the batch the record belongs to.
    """

    def __init__(self, message: str, shard_id: str, sequence_number: str | None) -> None:
        super().__init__(message)
        self.message = message
        self.shard_id = shard_id
        self.sequence_number = sequence_number

    def __str__(self) -> str:
        return f"{self.message} (shard {self.shard_id}, sequence number {self.sequence_number})"


class ShardTerminatedError(ReaderError):
    """Raised once a shard reader has stopped because of an unrecoverable error."""

    def __init__(self, shard_id: str) -> None:
        super().__init__(f"reading of shard {shard_id} terminated")
        self.shard_id = shard_id


def is_iterator_expired(error: BaseException) -> bool:
    """Return True if the error reports that the shard iterator has expired."""
    if not isinstance(error, ClientError):
        return False
    return error.response.get("Error", {}).get("Code") == ITERATOR_EXPIRED_CODE
