"""Kinesis stream reader module."""

from .constants import AFTER_SEQUENCE_NUMBER, LATEST
from .cursor import ShardCursor
from .decoder import decode_record
from .discovery import get_shards
from .errors import ReaderError, RecordDecodeError, ShardTerminatedError, is_iterator_expired
from .event import Event, Record
from .event_handler import EventHandler, SerializedDispatcher
from .kinesis import KinesisClient, create_kinesis_client
from .options import ReaderOptions
from .reader import StreamReader
from .shard_iterator import get_shard_iterator
from .shard_reader import ShardReader, ShardState

__all__ = [
    "AFTER_SEQUENCE_NUMBER",
    "LATEST",
    "Event",
    "EventHandler",
    "KinesisClient",
    "ReaderError",
    "ReaderOptions",
    "Record",
    "RecordDecodeError",
    "SerializedDispatcher",
    "ShardCursor",
    "ShardReader",
    "ShardState",
    "ShardTerminatedError",
    "StreamReader",
    "create_kinesis_client",
    "decode_record",
    "get_shard_iterator",
    "get_shards",
    "is_iterator_expired",
]
