# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Serialization of AWS responses that cannot be emitted as is.

S3 responses may carry streaming bodies (e.g GetObject::Body) and, in general, responses can contain datetime, bytes or
Decimal values or even references back to one of their own containers. Emitted payloads should be plain JSON compatible
data, so these are materialized or replaced here.
"""

import base64
import json
import logging
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Set

module_logger = logging.getLogger(__name__)

# marker for values that should be dropped from their parent container
_OMIT = object()


def _bytes_to_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return base64.b64encode(data).decode("ascii")


def _is_stream(value: Any) -> bool:
    return not isinstance(value, (str, bytes, bytearray, type)) and callable(getattr(value, "read", None))


def _read_stream(stream: Any) -> str:
    try:
        data = stream.read()
    finally:
        close = getattr(stream, "close", None)
        if callable(close):
            close()
    if isinstance(data, str):
        return data
    return _bytes_to_text(bytes(data or b""))


def _to_number(value: Decimal) -> Any:
    # Infinity/NaN have no JSON number form
    if not value.is_finite():
        return str(value)
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _serialize(value: Any, ancestors: Set[int]) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Enum):
        return _serialize(value.value, ancestors)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return _to_number(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _bytes_to_text(bytes(value))

    if isinstance(value, (dict, list, tuple, set, frozenset)):
        value_id = id(value)
        if value_id in ancestors:
            module_logger.debug("Dropping circular reference to %s container.", type(value).__name__)
            return _OMIT
        ancestors.add(value_id)
        try:
            if isinstance(value, dict):
                serialized = {}
                for key, item in value.items():
                    serialized_item = _serialize(item, ancestors)
                    if serialized_item is not _OMIT:
                        serialized[key if isinstance(key, str) else str(key)] = serialized_item
                return serialized
            return [item for item in (_serialize(v, ancestors) for v in value) if item is not _OMIT]
        finally:
            ancestors.discard(value_id)

    if _is_stream(value):
        return _read_stream(value)

    return repr(value)


def serialize_aws_response(response: Any) -> Optional[Any]:
    """
    Converts an AWS response into JSON compatible data.

    - circular references are dropped from their parents,
    - streaming bodies (botocore.response.StreamingBody or anything with a read method) are read fully and replaced
      with their content (as UTF-8 text or base64 encoded text if the content is binary),
    - datetime/date -> ISO 8601, Decimal -> int/float, bytes -> text/base64, Enum -> value, set/tuple -> list.

    :param response: raw boto3 response
    :return: JSON compatible copy of the response, None if the response is None
    """
    if response is None:
        return None
    serialized = _serialize(response, set())
    return None if serialized is _OMIT else serialized


class AWSResponseJSONEncoder(json.JSONEncoder):
    """JSON encoder for raw (non-serialized) AWS responses, mostly for datetime fields returned by boto3."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        elif isinstance(obj, Enum):
            return obj.value
        elif isinstance(obj, Decimal):
            return _to_number(obj)
        elif isinstance(obj, (bytes, bytearray)):
            return _bytes_to_text(bytes(obj))
        elif isinstance(obj, (set, frozenset)):
            return list(obj)
        else:
            return repr(obj)


def dumps_aws_response(obj: Any, **kwargs: Any) -> str:
    default_kwargs = {"ensure_ascii": False, "cls": AWSResponseJSONEncoder}
    default_kwargs.update(kwargs)
    return json.dumps(serialize_aws_response(obj), **default_kwargs)
