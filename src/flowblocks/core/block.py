# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from collections import OrderedDict
from typing import Any, Dict, Iterable, Optional

from flowblocks.core.aws.client_wrapper import invoke_operation, split_input_config
from flowblocks.core.aws.common import create_client, resolve_credentials
from flowblocks.core.aws.schema import (
    build_input_config,
    build_output_schema,
    get_operation_model,
    humanize,
    summarize_documentation,
)
from flowblocks.core.aws.serialization import serialize_aws_response
from flowblocks.core.events import DEFAULT_OUTPUT_KEY, BlockInput, EventEmitter

module_logger = logging.getLogger(__name__)


def to_block_key(operation_name: str) -> str:
    """'ListObjectsV2' -> 'listObjectsV2'"""
    return operation_name[:1].lower() + operation_name[1:]


class Block:
    """
    Exposes a single AWS API operation to the host platform.

    Each event is handled in the same way:
        input config -> credentials (static or assumed role) -> fresh service client -> one API call -> one emission

    Input/output descriptions are generated from botocore's service model of the operation on first access.

    Example:
        block = Block("sqs", "SendMessage")
        block.on_event(BlockInput({"region": "us-east-1", "QueueUrl": url, "MessageBody": "hello"}, app_config), emitter)
    """

    def __init__(self, service_name: str, operation_name: str, group: Optional[str] = None, serialize_response: bool = False) -> None:
        self._service_name = service_name
        self._operation_name = operation_name
        self._group = group or service_name
        self._serialize_response = serialize_response
        self._inputs: Optional[Dict[str, Dict[str, Any]]] = None
        self._output_schema: Optional[Dict[str, Any]] = None

    @property
    def service_name(self) -> str:
        return self._service_name

    @property
    def operation_name(self) -> str:
        return self._operation_name

    @property
    def group(self) -> str:
        return self._group

    @property
    def serialize_response(self) -> bool:
        return self._serialize_response

    @property
    def block_id(self) -> str:
        return f"{self._group}.{to_block_key(self._operation_name)}"

    @property
    def name(self) -> str:
        return humanize(self._operation_name)

    @property
    def operation_model(self):
        return get_operation_model(self._service_name, self._operation_name)

    @property
    def description(self) -> str:
        return summarize_documentation(self.operation_model.documentation) or f"{self.name} operation of {self._service_name}"

    @property
    def inputs(self) -> Dict[str, Dict[str, Any]]:
        if self._inputs is None:
            self._inputs = build_input_config(self.operation_model)
        return self._inputs

    @property
    def output_schema(self) -> Dict[str, Any]:
        if self._output_schema is None:
            self._output_schema = build_output_schema(self.operation_model)
        return self._output_schema

    @property
    def outputs(self) -> Dict[str, Dict[str, Any]]:
        return {
            DEFAULT_OUTPUT_KEY: {
                "name": f"{self.name} Result",
                "description": f"Result from {self._operation_name} operation",
                "possiblePrimaryParents": [DEFAULT_OUTPUT_KEY],
                "type": self.output_schema,
            }
        }

    def to_app_block(self) -> Dict[str, Any]:
        """Host facing definition of this block (name, description, inputs, outputs)."""
        return {
            "name": self.name,
            "description": self.description,
            "inputs": {DEFAULT_OUTPUT_KEY: {"config": self.inputs}},
            "outputs": self.outputs,
        }

    def on_event(self, block_input: BlockInput, emitter: EventEmitter) -> None:
        region, assume_role_arn, command_input = split_input_config(block_input.input_config)
        app_config = block_input.app_config

        credentials = resolve_credentials(app_config, region, assume_role_arn)
        client = create_client(self._service_name, region, credentials, app_config.endpoint)

        module_logger.info("Block %r calling %s::%s in region %r.", self.block_id, self._service_name, self._operation_name, region)
        response = invoke_operation(client, self._operation_name, command_input)

        if self._serialize_response:
            response = serialize_aws_response(response)

        emitter.emit(response or {})

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"service_name={self._service_name!r}, "
            f"operation_name={self._operation_name!r}, "
            f"group={self._group!r}, "
            f"serialize_response={self._serialize_response!r}"
            ")"
        )


def define_service_blocks(
    service_name: str, operation_names: Iterable[str], group: Optional[str] = None, serialize_response: bool = False
) -> Dict[str, Block]:
    """Creates the blocks of a group, keyed by block id (e.g 'sqs.sendMessage')."""
    blocks = OrderedDict()
    for operation_name in operation_names:
        block = Block(service_name, operation_name, group=group, serialize_response=serialize_response)
        if block.block_id in blocks:
            raise ValueError(f"Duplicate block {block.block_id!r} in group {block.group!r}!")
        blocks[block.block_id] = block
    return blocks
