import json
from typing import Any

from botocore.exceptions import ClientError

STREAM_NAME = "orders"


def client_error(code: str, operation_name: str = "GetRecords") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation_name)


def stream_description(
    status: str, shard_ids: list[str], has_more_shards: bool = False
) -> dict[str, Any]:
    return {
        "StreamDescription": {
            "StreamName": STREAM_NAME,
            "StreamStatus": status,
            "Shards": [{"ShardId": shard_id} for shard_id in shard_ids],
            "HasMoreShards": has_more_shards,
        }
    }


def kinesis_record(sequence_number: str, data: Any) -> dict[str, Any]:
    return {
        "SequenceNumber": sequence_number,
        "Data": json.dumps(data).encode(),
        "PartitionKey": "pk",
    }


def records_response(
    records: list[dict[str, Any]], next_iterator: str | None = "next-iterator"
) -> dict[str, Any]:
    response: dict[str, Any] = {"Records": records, "MillisBehindLatest": 0}
    if next_iterator is not None:
        response["NextShardIterator"] = next_iterator
    return response

