"""Module to obtain shard iterators."""

import logging

from .constants import AFTER_SEQUENCE_NUMBER, LATEST
from .cursor import ShardCursor
from .kinesis import KinesisClient

logger = logging.getLogger(__name__)


async def get_shard_iterator(
    kinesis: KinesisClient,
    stream_name: str,
    shard_id: str,
    last_sequence_number: str | None = None,
) -> ShardCursor:
    """
    Create an iterator reading from the latest record of a shard, or right after a specific
    sequence number when one is given.

    :param kinesis: the client used to call the service
    :param stream_name: the name of the stream
    :param shard_id: the ID of the shard to read
    :param last_sequence_number: the sequence number of the last record already delivered
    :raises botocore.exceptions.ClientError: if the service rejects the request.
    """
    params = {
        "StreamName": stream_name,
        "ShardId": shard_id,
        "ShardIteratorType": LATEST,
    }
    if last_sequence_number is not None:
        params["ShardIteratorType"] = AFTER_SEQUENCE_NUMBER
        params["StartingSequenceNumber"] = last_sequence_number

    response = await kinesis.get_shard_iterator(**params)
    cursor = ShardCursor(
        shard_id=shard_id,
        iterator=response["ShardIterator"],
        starting_sequence_number=last_sequence_number,
    )
    logger.info(
        "%s/%s: new iterator is %s (starting at %s)",
        stream_name,
        shard_id,
        cursor.iterator,
        last_sequence_number,
    )
    return cursor
