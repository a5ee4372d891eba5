"""Module containing the StreamReader, which consumes every shard of a stream."""

import asyncio
import logging
from collections.abc import Mapping

from .discovery import get_shards
from .errors import ReaderError, ShardTerminatedError
from .event_handler import EventHandler, SerializedDispatcher
from .kinesis import KinesisClient
from .options import ReaderOptions
from .shard_reader import ShardReader

logger = logging.getLogger(__name__)


class StreamReader:
    """Consume events from all shards of a Kinesis stream."""

    def __init__(
        self,
        event_handler: EventHandler,
        kinesis: KinesisClient,
        options: ReaderOptions | None = None,
    ) -> None:
        """
        Initializes a new instance of the StreamReader class.

        :param event_handler: Called for each received event which is not rejected. Calls are
            never concurrent, even though the shards are read concurrently.
        :param kinesis: The Kinesis client to read the stream with, typically an aiobotocore
            client created by `create_kinesis_client`.
        :param options: Polling and discovery settings, the defaults when omitted.
        """
        self.options = options or ReaderOptions()
        self.stream_name: str | None = None
        self._kinesis = kinesis
        self._dispatcher = SerializedDispatcher(event_handler)
        self._shard_readers: dict[str, ShardReader] = {}
        self._tasks: dict[str, asyncio.Task[None]] = {}

    @property
    def shard_readers(self) -> Mapping[str, ShardReader]:
        """Return the reader of each shard, keyed by shard ID."""
        return self._shard_readers

    @property
    def tasks(self) -> Mapping[str, asyncio.Task[None]]:
        """Return the task running each shard reader, keyed by shard ID."""
        return self._tasks

    @property
    def positions(self) -> dict[str, str | None]:
        """Return the sequence number of the last delivered record of each shard."""
        return {shard_id: reader.position for shard_id, reader in self._shard_readers.items()}

    async def start(self, stream_name: str) -> None:
        """
        Start consuming events from all shards of the stream.

        Returns as soon as a reader task runs for every shard; the tasks themselves keep
        going until their shard is closed or fails.

        :param stream_name: The name of the stream.
        :raises ReaderError: if the reader has been started already.
        :raises botocore.exceptions.ClientError: if the stream cannot be described.
        """
        if self._tasks:
            raise ReaderError(f"reader is already consuming {self.stream_name}")
        self.stream_name = stream_name

        shard_ids = await get_shards(
            self._kinesis,
            stream_name,
            backoff_base=self.options.describe_backoff_base,
            backoff_max=self.options.describe_backoff_max,
        )
        for shard_id in shard_ids:
            shard_reader = ShardReader(
                self._kinesis,
                stream_name,
                shard_id,
                self._dispatcher.dispatch,
                poll_interval=self.options.poll_interval,
                records_limit=self.options.records_limit,
            )
            self._shard_readers[shard_id] = shard_reader
            self._tasks[shard_id] = asyncio.create_task(
                shard_reader.run(), name=f"{stream_name}/{shard_id}"
            )
        logger.info("%s: started %d shard readers", stream_name, len(self._tasks))

    async def wait(self) -> None:
        """
        Wait for the shard readers to finish.

        Returns once every shard has been read to its end. The other shards keep being read
        when one of them fails.

        :raises ShardTerminatedError: for the first shard reader which failed, chained to the
            error that terminated it.
        """
        shard_ids = {task: shard_id for shard_id, task in self._tasks.items()}
        pending = set(shard_ids)
        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_EXCEPTION)
            failures = [
                (shard_ids[task], task.exception())
                for task in done
                if not task.cancelled() and task.exception() is not None
            ]
            if failures:
                shard_id, error = failures[0]
                raise ShardTerminatedError(shard_id) from error

    async def stop(self) -> None:
        """Cancel all shard readers and wait for them to finish."""
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("%s: stopped %d shard readers", self.stream_name, len(tasks))
