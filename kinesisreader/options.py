"""Tunable settings of a StreamReader."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import (
    DEFAULT_DESCRIBE_BACKOFF_BASE,
    DEFAULT_DESCRIBE_BACKOFF_MAX,
    DEFAULT_POLL_INTERVAL,
    MAX_RECORDS_LIMIT,
)

ENV_PREFIX = "KINESIS_READER_"


@dataclass(frozen=True)
class ReaderOptions:
    """
    Settings shared by all shard readers of a StreamReader.

    :param poll_interval: seconds to wait after each GetRecords call
    :param records_limit: maximum number of records per GetRecords call, None for the
        service default
    :param describe_backoff_base: first delay in seconds before describing a stream again
        which is not ACTIVE yet
    :param describe_backoff_max: upper bound of the delay between describe attempts
    """

    poll_interval: float = DEFAULT_POLL_INTERVAL
    records_limit: int | None = None
    describe_backoff_base: float = DEFAULT_DESCRIBE_BACKOFF_BASE
    describe_backoff_max: float = DEFAULT_DESCRIBE_BACKOFF_MAX

    def __post_init__(self) -> None:
        if self.poll_interval < 0:
            raise ValueError("poll_interval must not be negative")
        if self.records_limit is not None and not 1 <= self.records_limit <= MAX_RECORDS_LIMIT:
            raise ValueError(f"records_limit must be between 1 and {MAX_RECORDS_LIMIT}")
        if self.describe_backoff_base <= 0:
            raise ValueError("describe_backoff_base must be positive")
        if self.describe_backoff_max < self.describe_backoff_base:
            raise ValueError("describe_backoff_max must not be less than describe_backoff_base")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReaderOptions":
        """
        Build the options from KINESIS_READER_* environment variables, falling back to the
        defaults for any which are unset.

        :param environ: the environment to read, os.environ when omitted
        :raises ValueError: if a variable is set to something which is not a valid number.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, float | int] = {}
        for name, convert in (
            ("poll_interval", float),
            ("records_limit", int),
            ("describe_backoff_base", float),
            ("describe_backoff_max", float),
        ):
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None or raw == "":
                continue
            try:
                kwargs[name] = convert(raw)
            except ValueError as err:
                msg = f"invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}"
                raise ValueError(msg) from err
        return cls(**kwargs)  # type: ignore[arg-type]
