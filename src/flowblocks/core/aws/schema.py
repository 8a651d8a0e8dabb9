# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Generates the declarative (JSON-Schema like) input/output descriptions of blocks from botocore's service models.

These descriptions are only used by the host for its UI and validation assistance, they are not enforced on the
payloads of the blocks.
"""

import html
import logging
import re
from collections import OrderedDict
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple, Union

import botocore.session
from botocore.model import OperationModel, Shape

from flowblocks.core.aws.common import BlockConfigParams

module_logger = logging.getLogger(__name__)

# structures nested deeper than this are described as plain objects
MAX_SCHEMA_DEPTH = 3

_STRING_TYPES = {"string", "timestamp", "blob"}
_NUMBER_TYPES = {"integer", "long", "float", "double"}

_TAG_PATTERN = re.compile(r"<[^>]+>")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_FIRST_SENTENCE_PATTERN = re.compile(r"^(.+?[.!?])(?=\s+[A-Z(\"]|$)")
# "QueueUrl" -> "Queue Url", "DBProxyName" -> "DB Proxy Name", "ListObjectsV2" -> "List Objects V2"
_WORD_BOUNDARY_PATTERN = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

REGION_FIELD = {
    "name": "Region",
    "description": "AWS region for this operation",
    "type": "string",
    "required": True,
}

ASSUME_ROLE_ARN_FIELD = {
    "name": "Assume Role ARN",
    "description": "Optional IAM role ARN to assume before executing this operation. If provided, the block will use STS "
    "to assume this role and use the temporary credentials.",
    "type": "string",
    "required": False,
}

InputFieldType = Union[str, Dict[str, Any]]


@lru_cache(maxsize=None)
def _get_service_model(service_name: str):
    # static model metadata only (bundled with botocore), no clients or credentials involved
    return botocore.session.get_session().get_service_model(service_name)


def get_operation_model(service_name: str, operation_name: str) -> OperationModel:
    """
    :raises botocore.exceptions.UnknownServiceError: if the service is not known to the installed botocore
    :raises botocore.model.OperationNotFoundError: if the service has no such operation
    """
    return _get_service_model(service_name).operation_model(operation_name)


def humanize(name: str) -> str:
    return _WORD_BOUNDARY_PATTERN.sub(" ", name)


def summarize_documentation(documentation: Optional[str]) -> str:
    """Plain text of the first sentence of botocore's (HTML) documentation."""
    if not documentation:
        return ""
    text = html.unescape(_TAG_PATTERN.sub(" ", documentation))
    text = _WHITESPACE_PATTERN.sub(" ", text).strip()
    match = _FIRST_SENTENCE_PATTERN.match(text)
    return match.group(1) if match else text


def shape_to_json_schema(shape: Shape, depth: int = 0, path: Tuple[str, ...] = ()) -> Dict[str, Any]:
    """
    Maps a botocore shape to its JSON schema.

    :param shape: botocore shape
    :param depth: number of structures enclosing this shape
    :param path: names of the structures enclosing this shape (so as to detect recursive shapes)
    """
    type_name = shape.type_name
    if type_name in _STRING_TYPES:
        schema = {"type": "string"}
        enum = getattr(shape, "enum", None)
        if enum:
            schema["enum"] = list(enum)
        return schema
    if type_name in _NUMBER_TYPES:
        return {"type": "number"}
    if type_name == "boolean":
        return {"type": "boolean"}
    if type_name == "list":
        return {"type": "array", "items": shape_to_json_schema(shape.member, depth, path)}
    if type_name == "map":
        return {"type": "object", "additionalProperties": shape_to_json_schema(shape.value, depth, path)}
    if type_name == "structure":
        if depth >= MAX_SCHEMA_DEPTH or shape.name in path:
            return {"type": "object"}
        nested_path = path + (shape.name,)
        schema = {
            "type": "object",
            "properties": {
                member_name: shape_to_json_schema(member_shape, depth + 1, nested_path) for member_name, member_shape in shape.members.items()
            },
        }
        if shape.required_members:
            schema["required"] = list(shape.required_members)
        schema["additionalProperties"] = False
        return schema

    module_logger.warning("Unrecognized shape type %r for shape %r, describing it as a plain object.", type_name, shape.name)
    return {"type": "object"}


def _input_field_type(shape: Shape, path: Tuple[str, ...]) -> InputFieldType:
    schema = shape_to_json_schema(shape, depth=1, path=path)
    if shape.type_name in _STRING_TYPES | _NUMBER_TYPES | {"boolean"}:
        return schema["type"]
    return schema


def build_input_config(operation_model: OperationModel) -> Dict[str, Dict[str, Any]]:
    """Config fields of a block: region, assumeRoleArn followed by the request members of the operation"""
    config = OrderedDict()
    config[BlockConfigParams.REGION.value] = dict(REGION_FIELD)
    config[BlockConfigParams.ASSUME_ROLE_ARN.value] = dict(ASSUME_ROLE_ARN_FIELD)

    input_shape = operation_model.input_shape
    if input_shape is None:
        return config

    required_members = set(input_shape.required_members)
    path = (input_shape.name,)
    for member_name, member_shape in input_shape.members.items():
        if member_name in config:
            module_logger.warning(
                "Operation %r has a member %r clashing with block level parameters, it won't be exposed.", operation_model.name, member_name
            )
            continue
        config[member_name] = {
            "name": humanize(member_name),
            "description": summarize_documentation(member_shape.documentation) or humanize(member_name),
            "type": _input_field_type(member_shape, path),
            "required": member_name in required_members,
        }
    return config


def build_output_schema(operation_model: OperationModel) -> Dict[str, Any]:
    schema = {"type": "object", "properties": OrderedDict()}
    output_shape = operation_model.output_shape
    if output_shape is not None:
        path = (output_shape.name,)
        for member_name, member_shape in output_shape.members.items():
            member_schema = shape_to_json_schema(member_shape, depth=1, path=path)
            description = summarize_documentation(member_shape.documentation)
            if description:
                member_schema["description"] = description
            schema["properties"][member_name] = member_schema
        if output_shape.required_members:
            schema["required"] = list(output_shape.required_members)
    schema["additionalProperties"] = True
    return schema
