"""Decoding of record envelopes into events."""

import base64
import binascii
import json
from typing import Any

from .constants import REJECTED_FIELD
from .errors import RecordDecodeError
from .event import Event, Record


def decode_record(record: Record) -> Event:
    """
    Decode the envelope of a record into an event.

    The payload is JSON, either as the raw bytes botocore hands out or as the base64 text of
    the wire format. An event whose `is_rejected` field is true comes back with
    `rejected=True`; it is up to the caller not to deliver it.

    :param record: the record read from the shard
    :raises RecordDecodeError: if the payload is not base64, UTF-8 or JSON.
    """
    payload = _payload_bytes(record)
    try:
        data = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as error:
        raise RecordDecodeError(
            "error while parsing record payload", record.shard_id, record.sequence_number
        ) from error

    return Event(
        shard_id=record.shard_id,
        sequence_number=record.sequence_number,
        data=data,
        rejected=_is_rejected(data),
        partition_key=record.partition_key,
        arrival_time=record.arrival_time,
    )


def _payload_bytes(record: Record) -> bytes:
    if isinstance(record.data, bytes | bytearray):
        return bytes(record.data)
    try:
        return base64.b64decode(record.data, validate=True)
    except (binascii.Error, ValueError) as error:
        raise RecordDecodeError(
            "error while decoding record payload", record.shard_id, record.sequence_number
        ) from error


def _is_rejected(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    return bool(data.get(REJECTED_FIELD, False))
