"""Module to define the record and event dataclasses."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Record:
    """A raw record as read from a shard, before its envelope is decoded."""

    shard_id: str
    sequence_number: str
    data: bytes | str
    partition_key: str | None = None
    arrival_time: datetime | None = None


@dataclass(frozen=True)
class Event:
    """All properties of a decoded record which are handed to the application."""

    shard_id: str
    sequence_number: str
    data: Any
    rejected: bool = False
    partition_key: str | None = None
    arrival_time: datetime | None = None
