# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import base64
import io
import json
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum

from botocore.response import StreamingBody

from flowblocks.core.aws.serialization import AWSResponseJSONEncoder, dumps_aws_response, serialize_aws_response


class StorageClass(str, Enum):
    STANDARD = "STANDARD"


def _streaming_body(data: bytes) -> StreamingBody:
    return StreamingBody(io.BytesIO(data), len(data))


class TestResponseSerialization:
    def test_none_response(self):
        assert serialize_aws_response(None) is None

    def test_plain_response_is_unchanged(self):
        response = {"Buckets": [{"Name": "b1"}, {"Name": "b2"}], "IsTruncated": False, "KeyCount": 2}
        assert serialize_aws_response(response) == response

    def test_text_stream_body(self):
        body = _streaming_body(b'{"hello": "world"}')
        serialized = serialize_aws_response({"Body": body, "ContentLength": 18})

        assert serialized == {"Body": '{"hello": "world"}', "ContentLength": 18}
        json.dumps(serialized)

    def test_binary_stream_body(self):
        data = bytes([0xFF, 0xFE, 0x00, 0x81])
        serialized = serialize_aws_response({"Body": _streaming_body(data)})

        assert serialized["Body"] == base64.b64encode(data).decode("ascii")

    def test_stream_is_closed_after_read(self):
        raw = io.BytesIO(b"payload")
        serialize_aws_response({"Body": raw})
        assert raw.closed

    def test_circular_reference_is_dropped(self):
        response = {"Name": "root", "Children": []}
        response["Children"].append(response)
        response["Self"] = response

        serialized = serialize_aws_response(response)

        assert serialized == {"Name": "root", "Children": []}
        json.dumps(serialized)

    def test_shared_non_circular_reference_is_kept(self):
        owner = {"ID": "owner-1"}
        response = {"Contents": [{"Key": "a", "Owner": owner}, {"Key": "b", "Owner": owner}]}

        serialized = serialize_aws_response(response)

        assert serialized["Contents"][0]["Owner"] == {"ID": "owner-1"}
        assert serialized["Contents"][1]["Owner"] == {"ID": "owner-1"}

    def test_scalar_conversions(self):
        response = {
            "LastModified": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            "Day": date(2024, 1, 2),
            "Size": Decimal("10"),
            "Ratio": Decimal("0.5"),
            "Checksum": b"abc",
            "StorageClass": StorageClass.STANDARD,
            "Tags": ("a", "b"),
            "Ids": {7},
            "Other": object(),
        }

        serialized = serialize_aws_response(response)

        assert serialized["LastModified"] == "2024-01-02T03:04:05+00:00"
        assert serialized["Day"] == "2024-01-02"
        assert serialized["Size"] == 10 and isinstance(serialized["Size"], int)
        assert serialized["Ratio"] == 0.5
        assert serialized["Checksum"] == "abc"
        assert serialized["StorageClass"] == "STANDARD"
        assert serialized["Tags"] == ["a", "b"]
        assert serialized["Ids"] == [7]
        assert serialized["Other"].startswith("<object object")
        json.dumps(serialized)

    def test_non_finite_decimals(self):
        serialized = serialize_aws_response({"Max": Decimal("Infinity"), "Min": Decimal("-Infinity"), "Unknown": Decimal("NaN")})

        assert serialized == {"Max": "Infinity", "Min": "-Infinity", "Unknown": "NaN"}
        json.dumps(serialized, allow_nan=False)

    def test_non_string_keys(self):
        assert serialize_aws_response({1: "one"}) == {"1": "one"}


class TestResponseJSON:
    def test_dumps_aws_response(self):
        response = {"Body": _streaming_body(b"hello"), "LastModified": datetime(2023, 12, 25, 14, 30)}
        assert json.loads(dumps_aws_response(response)) == {"Body": "hello", "LastModified": "2023-12-25T14:30:00"}

    def test_encoder_on_raw_response(self):
        raw = {"CreatedTimestamp": datetime(2023, 12, 25, 14, 30), "Count": Decimal("3")}
        assert json.dumps(raw, cls=AWSResponseJSONEncoder) == '{"CreatedTimestamp": "2023-12-25T14:30:00", "Count": 3}'
