# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Catalog of blocks, one module per group of operations (e.g 'ec2-capacity', 'vpc-routing' over the same EC2 API)."""

from collections import OrderedDict
from functools import lru_cache
from typing import Dict

from flowblocks.core.block import Block

from . import (
    aws_lambda,
    cloudcontrol,
    cloudformation,
    cloudfront,
    cloudtrail,
    cloudwatch,
    dynamodb,
    ec2_admin,
    ec2_capacity,
    ec2_image_builder,
    ec2_instances,
    ec2_spot_fleet,
    ec2_storage,
    ec2_transit_gateway,
    ec2_transit_gateway_routing,
    ec2_vpn,
    ecr,
    ecs,
    eks,
    eventbridge,
    iam,
    kms,
    rds,
    redshift,
    route_53,
    s3,
    secrets_manager,
    ses,
    sqs,
    ssm,
    vpc_core,
    vpc_endpoints,
    vpc_routing,
    vpc_security,
    waf,
)

GROUP_MODULES = [
    cloudcontrol,
    cloudformation,
    cloudfront,
    cloudtrail,
    cloudwatch,
    dynamodb,
    ec2_admin,
    ec2_capacity,
    ec2_image_builder,
    ec2_instances,
    ec2_spot_fleet,
    ec2_storage,
    ec2_transit_gateway,
    ec2_transit_gateway_routing,
    ec2_vpn,
    ecr,
    ecs,
    eks,
    eventbridge,
    iam,
    kms,
    aws_lambda,
    rds,
    redshift,
    route_53,
    s3,
    secrets_manager,
    ses,
    sqs,
    ssm,
    vpc_core,
    vpc_endpoints,
    vpc_routing,
    vpc_security,
    waf,
]


@lru_cache(maxsize=1)
def get_registry() -> Dict[str, Block]:
    """All of the blocks keyed by block id (e.g 'sqs.sendMessage', 'vpc-routing.createRoute')"""
    registry = OrderedDict()
    for module in GROUP_MODULES:
        for block_id, block in module.blocks.items():
            if block_id in registry:
                raise ValueError(f"Block {block_id!r} is defined more than once in the catalog!")
            registry[block_id] = block
    return registry
