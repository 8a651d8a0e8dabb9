# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "redshift"

blocks = define_service_blocks(
    "redshift",
    [
        "AssociateDataShareConsumer",
        "AuthorizeClusterSecurityGroupIngress",
        "CreateClusterSnapshot",
        "CreateClusterSubnetGroup",
        "CreateEndpointAccess",
        "CreateEventSubscription",
        "CreateHsmConfiguration",
        "CreateIntegration",
        "CreateRedshiftIdcApplication",
        "CreateSnapshotSchedule",
        "CreateUsageLimit",
        "DescribeClusterSecurityGroups",
        "DescribeDataShares",
        "DescribeDataSharesForConsumer",
        "DescribeDataSharesForProducer",
        "DescribeEndpointAccess",
        "DescribeEvents",
        "DescribeRedshiftIdcApplications",
        "DescribeScheduledActions",
        "DescribeSnapshotSchedules",
        "DescribeTableRestoreStatus",
        "DescribeUsageLimits",
        "DisassociateDataShareConsumer",
        "GetReservedNodeExchangeConfigurationOptions",
        "ListRecommendations",
        "ModifyClusterSnapshot",
        "ModifyClusterSubnetGroup",
        "ModifyEventSubscription",
        "ModifyIntegration",
        "ModifyScheduledAction",
        "RestoreTableFromClusterSnapshot",
        "RevokeClusterSecurityGroupIngress",
    ],
    group=GROUP,
)
