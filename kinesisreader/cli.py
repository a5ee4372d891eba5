"""Command line entry point printing the events of a stream as JSON lines."""

import argparse
import asyncio
import dataclasses
import json
import logging
import os
import sys
from collections.abc import Sequence

from botocore.exceptions import ClientError

from .errors import ShardTerminatedError
from .event import Event
from .kinesis import create_kinesis_client
from .options import ENV_PREFIX, ReaderOptions
from .reader import StreamReader

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kinesisreader", description="Print the events appended to a Kinesis stream"
    )
    parser.add_argument("stream_name", help="name of the stream to read")
    parser.add_argument("--region", default=None, help="AWS region of the stream")
    parser.add_argument("--endpoint-url", default=None, help="alternative Kinesis endpoint")
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=None,
        help="seconds to wait between reads of a shard",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def print_event(event: Event) -> None:
    print(json.dumps(event.data), flush=True)


async def run(args: argparse.Namespace, options: ReaderOptions) -> None:
    async with create_kinesis_client(args.region, args.endpoint_url) as kinesis:
        reader = StreamReader(print_event, kinesis, options)
        await reader.start(args.stream_name)
        try:
            await reader.wait()
        finally:
            await reader.stop()


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("botocore").setLevel(logging.INFO)

    try:
        options = ReaderOptions.from_env()
        if args.poll_interval is not None:
            options = dataclasses.replace(options, poll_interval=args.poll_interval)
    except ValueError as error:
        logger.error("invalid configuration: %s", error)
        return 2

    try:
        asyncio.run(run(args, options))
    except ShardTerminatedError as error:
        logger.error("%s: %s", error, error.__cause__)
        return 1
    except ClientError as error:
        logger.error("%s: %s", args.stream_name, error)
        return 1
    except KeyboardInterrupt:
        pass
    return 0
