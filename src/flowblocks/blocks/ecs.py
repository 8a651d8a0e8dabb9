# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "ecs"

blocks = define_service_blocks(
    "ecs",
    [
        "CreateCapacityProvider",
        "CreateCluster",
        "DeleteService",
        "DescribeCapacityProviders",
        "DescribeClusters",
        "DescribeServiceDeployments",
        "DescribeServiceRevisions",
        "ListServiceDeployments",
        "PutClusterCapacityProviders",
        "RegisterContainerInstance",
        "StopTask",
        "SubmitTaskStateChange",
    ],
    group=GROUP,
)
