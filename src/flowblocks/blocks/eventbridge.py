# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "eventbridge"

blocks = define_service_blocks(
    "events",
    [
        "CreateConnection",
        "DescribeEndpoint",
        "ListEndpoints",
        "UpdateConnection",
    ],
    group=GROUP,
)
