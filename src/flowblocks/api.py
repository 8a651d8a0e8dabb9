# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Dict, List, Mapping, Optional, Union

from ._logging_config import init_basic_logging
from .blocks import get_registry
from .core.app import APP_CONFIG_FIELDS
from .core.aws.common import AppConfig, AppConfigParams, AWSCredentials, BlockConfigParams, resolve_credentials
from .core.aws.serialization import dumps_aws_response, serialize_aws_response
from .core.block import Block, define_service_blocks
from .core.events import BlockInput, CollectingEventEmitter, EventEmitter


def list_blocks(group: Optional[str] = None) -> List[Block]:
    blocks = get_registry().values()
    if group is None:
        return list(blocks)
    return [block for block in blocks if block.group == group]


def get_block(block_id: str) -> Block:
    """
    :param block_id: '<group>.<operation in lowerCamelCase>' (e.g 'sqs.sendMessage', 'ec2-capacity.allocateHosts')
    :raises ValueError: if there is no such block in the catalog
    """
    try:
        return get_registry()[block_id]
    except KeyError:
        raise ValueError(f"Unknown block {block_id!r}!")


def describe_block(block_id: str) -> Dict[str, Any]:
    return get_block(block_id).to_app_block()


def run_block(block_id: str, input_config: Mapping[str, Any], app_config: Union[AppConfig, Mapping[str, Any]]) -> Dict[str, Any]:
    """Runs a block once outside of a host and returns the payload it emitted.

    :param input_config: block config (region, optional assumeRoleArn and the parameters of the operation)
    :param app_config: either an AppConfig or the host's camelCase app config mapping
    """
    block = get_block(block_id)
    if not isinstance(app_config, AppConfig):
        app_config = AppConfig.from_dict(app_config)
    emitter = CollectingEventEmitter()
    block.on_event(BlockInput(input_config, app_config), emitter)
    return emitter.last_payload
