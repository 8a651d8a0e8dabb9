# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from flowblocks.blocks import GROUP_MODULES, get_registry
from flowblocks.core.block import to_block_key

ALL_BLOCKS = list(get_registry().values())

GROUP_SERVICES = {
    "eventbridge": "events",
    "route-53": "route53",
    "secrets-manager": "secretsmanager",
    "lambda": "lambda",
    "ec2-capacity": "ec2",
    "ec2-transit-gateway-routing": "ec2",
    "vpc-core": "ec2",
    "vpc-security": "ec2",
    "s3": "s3",
    "sqs": "sqs",
}


class TestCatalog:
    def test_size(self):
        assert len(GROUP_MODULES) == 35
        assert len(ALL_BLOCKS) == 402

    def test_block_ids(self):
        registry = get_registry()
        for block_id, block in registry.items():
            assert block_id == f"{block.group}.{to_block_key(block.operation_name)}"

    def test_groups(self):
        groups = {module.GROUP for module in GROUP_MODULES}
        assert len(groups) == len(GROUP_MODULES)
        for module in GROUP_MODULES:
            assert all(block.group == module.GROUP for block in module.blocks.values())

    @pytest.mark.parametrize("group,service_name", sorted(GROUP_SERVICES.items()))
    def test_group_services(self, group, service_name):
        blocks = [block for block in ALL_BLOCKS if block.group == group]
        assert blocks
        assert {block.service_name for block in blocks} == {service_name}

    def test_only_s3_responses_are_serialized(self):
        for block in ALL_BLOCKS:
            assert block.serialize_response == (block.service_name == "s3"), block.block_id

    @pytest.mark.parametrize("block_id", ["sqs.sendMessage", "sqs.receiveMessage", "s3.getObject", "s3.listObjectsV2", "lambda.listFunctions"])
    def test_known_blocks(self, block_id):
        assert block_id in get_registry()

    @pytest.mark.parametrize("block", ALL_BLOCKS, ids=[block.block_id for block in ALL_BLOCKS])
    def test_operation_models(self, block):
        # every operation exists in the installed botocore and its schemas can be generated
        operation_model = block.operation_model
        assert operation_model.name == block.operation_name
        assert list(block.inputs.keys())[:2] == ["region", "assumeRoleArn"]
        assert block.output_schema["type"] == "object"
