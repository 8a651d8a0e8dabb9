# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "ec2-spot-fleet"

blocks = define_service_blocks(
    "ec2",
    [
        "DescribeFleetHistory",
        "DescribeScheduledInstanceAvailability",
        "DescribeScheduledInstances",
        "DescribeSpotFleetRequests",
        "DescribeSpotInstanceRequests",
        "DescribeSpotPriceHistory",
        "ModifyFleet",
        "ModifySpotFleetRequest",
        "PurchaseScheduledInstances",
        "RequestSpotFleet",
    ],
    group=GROUP,
)
