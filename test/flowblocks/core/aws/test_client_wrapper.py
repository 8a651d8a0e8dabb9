# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest
from botocore.exceptions import ClientError
from mock import MagicMock

from flowblocks.core.aws.client_wrapper import get_client_method_name, invoke_operation, split_input_config


class TestClientWrapper:
    @pytest.fixture()
    def mock_client(self):
        client = MagicMock()
        client.meta.service_model.service_name = "sqs"
        return client

    def test_split_input_config(self):
        input_config = {
            "region": "us-east-1",
            "assumeRoleArn": "arn:aws:iam::123456789012:role/Target",
            "QueueUrl": "https://sqs.us-east-1.amazonaws.com/123456789012/q",
            "MessageBody": "hello",
        }

        region, assume_role_arn, command_input = split_input_config(input_config)

        assert region == "us-east-1"
        assert assume_role_arn == "arn:aws:iam::123456789012:role/Target"
        assert command_input == {"QueueUrl": "https://sqs.us-east-1.amazonaws.com/123456789012/q", "MessageBody": "hello"}
        # caller's config is left intact
        assert "region" in input_config and "assumeRoleArn" in input_config

    def test_split_input_config_passes_everything_else_through(self):
        region, assume_role_arn, command_input = split_input_config({"region": "us-east-1", "MaxResults": 5, "NextToken": None})

        assert assume_role_arn is None
        assert command_input == {"MaxResults": 5, "NextToken": None}

    def test_split_input_config_without_block_params(self):
        assert split_input_config({}) == (None, None, {})

    @pytest.mark.parametrize(
        "operation_name,method_name",
        [
            ("SendMessage", "send_message"),
            ("ListObjectsV2", "list_objects_v2"),
            ("DescribeDBProxies", "describe_db_proxies"),
            ("TestDNSAnswer", "test_dns_answer"),
            ("CreateWebACL", "create_web_acl"),
            ("CreateVirtualMFADevice", "create_virtual_mfa_device"),
        ],
    )
    def test_get_client_method_name(self, operation_name, method_name):
        assert get_client_method_name(operation_name) == method_name

    def test_invoke_operation(self, mock_client):
        mock_client.send_message.return_value = {"MessageId": "id-1"}

        response = invoke_operation(mock_client, "SendMessage", {"QueueUrl": "url", "MessageBody": "hello"})

        mock_client.send_message.assert_called_once_with(QueueUrl="url", MessageBody="hello")
        assert response == {"MessageId": "id-1"}

    def test_invoke_operation_exception(self, mock_client):
        error = ClientError(operation_name="SendMessage", error_response={"Error": {"Code": "QueueDoesNotExist"}})
        mock_client.send_message.side_effect = error

        with pytest.raises(ClientError) as raised:
            invoke_operation(mock_client, "SendMessage", {"QueueUrl": "url", "MessageBody": "hello"})

        assert raised.value is error
        assert mock_client.send_message.call_count == 1
