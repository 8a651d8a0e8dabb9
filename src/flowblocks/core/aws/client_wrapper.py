# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from botocore import xform_name

from flowblocks.core.aws.common import BlockConfigParams

module_logger = logging.getLogger(__name__)


def split_input_config(input_config: Mapping[str, Any]) -> Tuple[Optional[str], Optional[str], Dict[str, Any]]:
    """Separates block level parameters (region, assumeRoleArn) from the parameters of the wrapped operation.

    Everything other than block level parameters is forwarded as is (no filtering of None values, no type coercion).

    :return: (region, assume_role_arn, command_input)
    """
    command_input = dict(input_config)
    region = command_input.pop(BlockConfigParams.REGION.value, None)
    assume_role_arn = command_input.pop(BlockConfigParams.ASSUME_ROLE_ARN.value, None)
    return region, assume_role_arn, command_input


def get_client_method_name(operation_name: str) -> str:
    """'ListObjectsV2' -> 'list_objects_v2', 'DescribeDBProxies' -> 'describe_db_proxies'"""
    return xform_name(operation_name)


def invoke_operation(client, operation_name: str, command_input: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Wraps the single API call a block makes, e.g
    https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/sqs/client/send_message.html

    No pagination, no retries (other than botocore's own transport level retry config), errors are raised as is.

    :param client: The Boto3 client object for the target service.
    :param operation_name: API name of the operation as in the service model (e.g 'SendMessage')
    :param command_input: request parameters of the operation
    :return: raw response of the operation
    """
    method_name = get_client_method_name(operation_name)
    operation = getattr(client, method_name)
    module_logger.debug("Invoking %s::%s with parameters %r.", client.meta.service_model.service_name, method_name, sorted(command_input))
    return operation(**command_input)
