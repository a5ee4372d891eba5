"""Module containing constants shared by the shard readers and the stream reader."""

LATEST = "LATEST"
"""LATEST is the iterator type which starts reading just after the most recent record."""

AFTER_SEQUENCE_NUMBER = "AFTER_SEQUENCE_NUMBER"
"""AFTER_SEQUENCE_NUMBER is the iterator type which resumes right after a given record."""

STREAM_STATUS_ACTIVE = "ACTIVE"

ITERATOR_EXPIRED_CODE = "ExpiredIteratorException"
"""Error code reported by the service when a shard iterator can no longer be used."""

REJECTED_FIELD = "is_rejected"
"""Envelope field which, when true, marks an event that must not reach the handler."""

DEFAULT_POLL_INTERVAL = 1.0
"""
Seconds to wait after every GetRecords call. Kinesis allows five reads per second per
shard, so pacing each reader keeps it clear of ProvisionedThroughputExceededException.
"""

DEFAULT_DESCRIBE_BACKOFF_BASE = 0.5
DEFAULT_DESCRIBE_BACKOFF_MAX = 30.0

MAX_RECORDS_LIMIT = 10000
"""Largest Limit GetRecords accepts."""
