"""This module defines the ShardCursor dataclass, the read position handed out for one shard."""

from dataclasses import dataclass

from .constants import AFTER_SEQUENCE_NUMBER, LATEST


@dataclass(frozen=True)
class ShardCursor:
    """
    A dataclass encapsulating the shard ID together with a shard iterator issued for it.

    :param shard_id: The shard ID
    :param iterator: The opaque, single-use iterator token
    :param starting_sequence_number: The sequence number the iterator resumes after,
        or None when it starts at the latest record
    """

    shard_id: str
    iterator: str
    starting_sequence_number: str | None = None

    @property
    def iterator_type(self) -> str:
        """Return the iterator type the cursor was requested with."""
        if self.starting_sequence_number is None:
            return LATEST
        return AFTER_SEQUENCE_NUMBER
