# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "cloudtrail"

blocks = define_service_blocks(
    "cloudtrail",
    [
        "CreateChannel",
        "CreateDashboard",
        "CreateTrail",
        "DescribeQuery",
        "GetChannel",
        "GetDashboard",
        "GetEventDataStore",
        "GetEventSelectors",
        "LookupEvents",
        "RestoreEventDataStore",
        "StopImport",
        "UpdateTrail",
    ],
    group=GROUP,
)
