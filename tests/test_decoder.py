import base64
import json
from datetime import datetime, timezone

import pytest

from kinesisreader import Event, Record, RecordDecodeError, decode_record


def make_record(data: bytes | str, sequence_number: str = "5") -> Record:
    return Record(shard_id="shardId-000000000000", sequence_number=sequence_number, data=data)


def test_decodes_json_payload_bytes() -> None:
    """Test that a payload handed out as bytes by botocore is parsed as JSON."""
    # arrange
    record = make_record(json.dumps({"type": "OrderPlaced", "order_id": 17}).encode())

    # act
    event = decode_record(record)

    # assert
    assert event == Event(
        shard_id="shardId-000000000000",
        sequence_number="5",
        data={"type": "OrderPlaced", "order_id": 17},
        rejected=False,
    )


def test_keeps_partition_key_and_arrival_time() -> None:
    """Test that the partition key and arrival time of a record are carried by its event."""
    # arrange
    arrival_time = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    record = Record(
        shard_id="shardId-000000000000",
        sequence_number="5",
        data=b'{"type": "OrderPlaced"}',
        partition_key="order-17",
        arrival_time=arrival_time,
    )

    # act
    event = decode_record(record)

    # assert
    assert event.partition_key == "order-17"
    assert event.arrival_time == arrival_time


def test_decodes_base64_payload_text() -> None:
    """Test that a payload in its base64 wire form is decoded before being parsed."""
    # arrange
    payload = base64.b64encode(b'{"type": "OrderPlaced"}').decode()

    # act
    event = decode_record(make_record(payload))

    # assert
    assert event.data == {"type": "OrderPlaced"}


@pytest.mark.parametrize(
    ("data", "rejected"),
    [
        ({"type": "OrderPlaced", "is_rejected": True}, True),
        ({"type": "OrderPlaced", "is_rejected": False}, False),
        ({"type": "OrderPlaced"}, False),
        (["not", "an", "object"], False),
        ("just a string", False),
    ],
)
def test_rejected_flag_defaults_to_false(data, rejected) -> None:
    """Test that only an explicit is_rejected field marks the event as rejected."""
    # act
    event = decode_record(make_record(json.dumps(data).encode()))

    # assert
    assert event.rejected is rejected
    assert event.data == data


def test_raises_error_when_payload_is_not_json() -> None:
    """Test that a payload which is not JSON raises a RecordDecodeError."""
    # arrange
    record = make_record(b"not json", sequence_number="42")

    # act & assert
    with pytest.raises(RecordDecodeError, match="error while parsing record payload") as excinfo:
        decode_record(record)

    assert excinfo.value.shard_id == "shardId-000000000000"
    assert excinfo.value.sequence_number == "42"
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_raises_error_when_payload_is_not_utf8() -> None:
    """Test that bytes which are not UTF-8 raise a RecordDecodeError."""
    with pytest.raises(RecordDecodeError, match="error while parsing record payload"):
        decode_record(make_record(b"\xff\xfe\xfa"))


def test_raises_error_when_payload_text_is_not_base64() -> None:
    """Test that text which is not valid base64 raises a RecordDecodeError."""
    with pytest.raises(RecordDecodeError, match="error while decoding record payload"):
        decode_record(make_record("%%% not base64 %%%"))


def test_decoding_is_repeatable() -> None:
    """Test that decoding the same record twice gives the same outcome."""
    # arrange
    record = make_record(b'{"id": 1, "is_rejected": true}')

    # act & assert
    assert decode_record(record) == decode_record(record)
