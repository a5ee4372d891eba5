"""Module to define the KinesisClient interface and build the default implementation of it."""

from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol

from aiobotocore.session import get_session

# pylint: disable=R0903


class KinesisClient(Protocol):
    """
    KinesisClient is an interface describing the three calls of the Kinesis Data Streams API
    which a stream reader needs. The aiobotocore Kinesis client satisfies it.
    """

    async def describe_stream(self, **kwargs: Any) -> dict[str, Any]:
        """
        Describe the stream, its status and (a page of) its shards.

        :param StreamName: the name of the stream
        :param ExclusiveStartShardId: the shard to continue listing after
        """
        ...

    async def get_shard_iterator(self, **kwargs: Any) -> dict[str, Any]:
        """
        Obtain an iterator for reading a shard.

        :param StreamName: the name of the stream
        :param ShardId: the shard to read
        :param ShardIteratorType: where the iterator starts
        :param StartingSequenceNumber: the sequence number to resume after, if any
        """
        ...

    async def get_records(self, **kwargs: Any) -> dict[str, Any]:
        """
        Read a batch of records using an iterator.

        :param ShardIterator: the iterator to read from
        :param Limit: the maximum number of records to return
        """
        ...


def create_kinesis_client(
    region_name: str | None = None,
    endpoint_url: str | None = None,
) -> AbstractAsyncContextManager[Any]:
    """
    Create an aiobotocore Kinesis client using the default credential chain.

    The result must be entered with `async with`, which opens the underlying connection pool
    and closes it again on exit.

    :param region_name: the AWS region, defaults to the one configured for botocore
    :param endpoint_url: an alternative endpoint, e.g. a local Kinesis emulator
    """
    session = get_session()
    return session.create_client("kinesis", region_name=region_name, endpoint_url=endpoint_url)
