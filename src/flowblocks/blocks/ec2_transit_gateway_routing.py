# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "ec2-transit-gateway-routing"

blocks = define_service_blocks(
    "ec2",
    [
        "CreateTransitGatewayRouteTableAnnouncement",
        "DescribeTransitGatewayRouteTableAnnouncements",
        "SearchTransitGatewayRoutes",
    ],
    group=GROUP,
)
