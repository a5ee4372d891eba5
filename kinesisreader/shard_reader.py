"""Module containing the read loop of a single shard."""

import asyncio
import enum
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from botocore.exceptions import ClientError

from .constants import DEFAULT_POLL_INTERVAL
from .cursor import ShardCursor
from .decoder import decode_record
from .errors import ReaderError, is_iterator_expired
from .event import Event, Record
from .kinesis import KinesisClient
from .shard_iterator import get_shard_iterator

logger = logging.getLogger(__name__)


class ShardState(enum.Enum):
    """The states a ShardReader moves through."""

    ACQUIRING_ITERATOR = "acquiring_iterator"
    POLLING = "polling"
    TERMINATED = "terminated"
    SHARD_END = "shard_end"


class ShardReader:
    """
    Continuously reads records from one shard and dispatches the decoded events.

    The reader starts by acquiring an iterator, then polls with it, pausing poll_interval
    seconds after every GetRecords call. When the service reports the iterator as expired a
    new one is acquired after the last delivered sequence number, so a batch that was cut
    short is read again rather than skipped. Any other error terminates the reader.
    """

    def __init__(
        self,
        kinesis: KinesisClient,
        stream_name: str,
        shard_id: str,
        dispatch: Callable[[Event], Awaitable[None]],
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        records_limit: int | None = None,
        position: str | None = None,
    ) -> None:
        """
        Initialize the shard reader.

        :param kinesis: the client used to call the service
        :param stream_name: the name of the stream the shard belongs to
        :param shard_id: the ID of the shard to read
        :param dispatch: coroutine function called with every event which is not rejected
        :param poll_interval: seconds to wait after each GetRecords call
        :param records_limit: maximum number of records per GetRecords call
        :param position: sequence number to resume after, None to start at the latest record
        """
        self.stream_name = stream_name
        self.shard_id = shard_id
        self.position = position
        self.state = ShardState.ACQUIRING_ITERATOR
        self.error: Exception | None = None
        self._kinesis = kinesis
        self._dispatch = dispatch
        self._poll_interval = poll_interval
        self._records_limit = records_limit
        self._cursor: ShardCursor | None = None

    @property
    def cursor(self) -> ShardCursor | None:
        """Return the iterator currently held, if any."""
        return self._cursor

    async def run(self) -> None:
        """
        Read the shard until it is closed or an unrecoverable error occurs.

        :raises Exception: the error which terminated the reader, after it has been logged
            and stored in `error`.
        """
        try:
            while True:
                if self.state is ShardState.ACQUIRING_ITERATOR:
                    await self._acquire_iterator()
                elif self.state is ShardState.POLLING:
                    await self._poll()
                else:
                    return
        except Exception as error:
            self._terminate(error)
            raise

    async def _acquire_iterator(self) -> None:
        try:
            self._cursor = await get_shard_iterator(
                self._kinesis, self.stream_name, self.shard_id, self.position
            )
        except ClientError as error:
            if not is_iterator_expired(error):
                raise
            logger.debug(
                "%s/%s: iterator expired while acquiring it", self.stream_name, self.shard_id
            )
            return
        self.state = ShardState.POLLING

    async def _poll(self) -> None:
        if self._cursor is None:
            raise ReaderError(f"{self.stream_name}/{self.shard_id}: polling without an iterator")
        params: dict[str, Any] = {"ShardIterator": self._cursor.iterator}
        if self._records_limit is not None:
            params["Limit"] = self._records_limit

        try:
            response = await self._kinesis.get_records(**params)
        except ClientError as error:
            if not is_iterator_expired(error):
                raise
            logger.info(
                "%s/%s: iterator expired, renewing it after %s",
                self.stream_name,
                self.shard_id,
                self.position,
            )
            self._cursor = None
            self.state = ShardState.ACQUIRING_ITERATOR
            return

        # Stay within the per-shard read throughput, whether or not records were found.
        await asyncio.sleep(self._poll_interval)

        records = response["Records"]
        if records:
            await self._handle_records(records)

        next_iterator = response.get("NextShardIterator")
        if next_iterator is None:
            logger.info(
                "%s/%s: shard is closed, last sequence number %s",
                self.stream_name,
                self.shard_id,
                self.position,
            )
            self._cursor = None
            self.state = ShardState.SHARD_END
            return
        self._cursor = ShardCursor(self.shard_id, next_iterator, self.position)

    async def _handle_records(self, records: list[dict[str, Any]]) -> None:
        for raw in records:
            event = decode_record(self._to_record(raw))
            if event.rejected:
                logger.debug(
                    "%s/%s: skipping rejected event %s",
                    self.stream_name,
                    self.shard_id,
                    event.sequence_number,
                )
                continue
            await self._dispatch(event)

        # Save the sequence number of the last record read so the next iterator starts there.
        self._advance(records[-1]["SequenceNumber"])

    def _advance(self, sequence_number: str) -> None:
        if self.position is None or int(sequence_number) > int(self.position):
            self.position = sequence_number

    def _to_record(self, raw: dict[str, Any]) -> Record:
        return Record(
            shard_id=self.shard_id,
            sequence_number=raw["SequenceNumber"],
            data=raw["Data"],
            partition_key=raw.get("PartitionKey"),
            arrival_time=raw.get("ApproximateArrivalTimestamp"),
        )

    def _terminate(self, error: Exception) -> None:
        self.state = ShardState.TERMINATED
        self.error = error
        self._cursor = None
        logger.warning(
            "%s/%s: reading failed: %r", self.stream_name, self.shard_id, error, exc_info=error
        )
