"""Module to find the shards of a stream."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from tenacity import AsyncRetrying, RetryCallState, retry_if_result, wait_exponential

from .constants import (
    DEFAULT_DESCRIBE_BACKOFF_BASE,
    DEFAULT_DESCRIBE_BACKOFF_MAX,
    STREAM_STATUS_ACTIVE,
)
from .kinesis import KinesisClient

logger = logging.getLogger(__name__)


def _is_not_active(description: dict[str, Any]) -> bool:
    return description["StreamStatus"] != STREAM_STATUS_ACTIVE


def _log_not_active(stream_name: str) -> Callable[[RetryCallState], None]:
    def log(retry_state: RetryCallState) -> None:
        status = retry_state.outcome.result()["StreamStatus"] if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.info(
            "%s: stream is %s, describing it again in %.1f seconds", stream_name, status, delay
        )

    return log


async def get_shards(
    kinesis: KinesisClient,
    stream_name: str,
    backoff_base: float = DEFAULT_DESCRIBE_BACKOFF_BASE,
    backoff_max: float = DEFAULT_DESCRIBE_BACKOFF_MAX,
) -> list[str]:
    """
    Find all shards of a stream, waiting for the stream to become ACTIVE first.

    While the stream is in any other state it is described again after a delay which grows
    exponentially from backoff_base up to backoff_max. There is no limit on the number of
    attempts.

    :param kinesis: the client used to call the service
    :param stream_name: the name of the stream
    :param backoff_base: the first delay in seconds between describe attempts
    :param backoff_max: the largest delay in seconds between describe attempts
    :return: the IDs of the shards, in the order the service lists them
    :raises botocore.exceptions.ClientError: if the stream cannot be described.
    """
    retrying = AsyncRetrying(
        sleep=asyncio.sleep,
        wait=wait_exponential(multiplier=backoff_base, max=backoff_max),
        retry=retry_if_result(_is_not_active),
        before_sleep=_log_not_active(stream_name),
        reraise=True,
    )
    description = await retrying(_describe, kinesis, stream_name)

    shards = list(description["Shards"])
    while description.get("HasMoreShards"):
        description = await _describe(
            kinesis, stream_name, exclusive_start_shard_id=shards[-1]["ShardId"]
        )
        shards.extend(description["Shards"])

    shard_ids = [shard["ShardId"] for shard in shards]
    logger.info("%s: found %d shards: %s", stream_name, len(shard_ids), ", ".join(shard_ids))
    return shard_ids


async def _describe(
    kinesis: KinesisClient,
    stream_name: str,
    exclusive_start_shard_id: str | None = None,
) -> dict[str, Any]:
    params = {"StreamName": stream_name}
    if exclusive_start_shard_id is not None:
        params["ExclusiveStartShardId"] = exclusive_start_shard_id
    response = await kinesis.describe_stream(**params)
    return response["StreamDescription"]
