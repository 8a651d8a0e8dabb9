# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "ec2-instances"

blocks = define_service_blocks(
    "ec2",
    [
        "CreateInstanceConnectEndpoint",
        "DescribeBundleTasks",
        "DescribeInstanceConnectEndpoints",
        "DescribeInstanceTopology",
        "DescribeInstances",
        "ImportInstance",
        "ModifyInstanceAttribute",
        "ModifyInstanceEventWindow",
    ],
    group=GROUP,
)
