from unittest.mock import AsyncMock, MagicMock

import pytest

from kinesisreader import KinesisClient


@pytest.fixture
def mock_kinesis():
    kinesis_mock = MagicMock(spec=KinesisClient)
    kinesis_mock.describe_stream = AsyncMock()
    kinesis_mock.get_shard_iterator = AsyncMock()
    kinesis_mock.get_records = AsyncMock()
    return kinesis_mock
