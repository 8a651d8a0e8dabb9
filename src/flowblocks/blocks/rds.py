# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "rds"

blocks = define_service_blocks(
    "rds",
    [
        "AuthorizeDBSecurityGroupIngress",
        "CopyDBClusterSnapshot",
        "CopyDBSnapshot",
        "CreateBlueGreenDeployment",
        "CreateDBClusterSnapshot",
        "CreateDBProxyEndpoint",
        "CreateDBShardGroup",
        "CreateDBSnapshot",
        "CreateEventSubscription",
        "CreateIntegration",
        "CreateOptionGroup",
        "CreateTenantDatabase",
        "DeleteBlueGreenDeployment",
        "DeleteDBClusterAutomatedBackup",
        "DeleteTenantDatabase",
        "DescribeBlueGreenDeployments",
        "DescribeCertificates",
        "DescribeDBClusterAutomatedBackups",
        "DescribeDBClusterParameters",
        "DescribeDBInstanceAutomatedBackups",
        "DescribeDBLogFiles",
        "DescribeDBProxies",
        "DescribeDBProxyEndpoints",
        "DescribeDBProxyTargets",
        "DescribeDBRecommendations",
        "DescribeDBSecurityGroups",
        "DescribeDBSnapshotTenantDatabases",
        "DescribeDBSubnetGroups",
        "DescribeEngineDefaultParameters",
        "DescribeEvents",
        "DescribeGlobalClusters",
        "DescribeIntegrations",
        "DescribeOrderableDBInstanceOptions",
        "DescribeReservedDBInstancesOfferings",
        "FailoverGlobalCluster",
        "ModifyDBClusterEndpoint",
        "ModifyDBProxy",
        "ModifyDBProxyTargetGroup",
        "ModifyDBRecommendation",
        "ModifyIntegration",
        "ModifyOptionGroup",
        "ModifyTenantDatabase",
        "PurchaseReservedDBInstancesOffering",
        "StartDBInstanceAutomatedBackupsReplication",
        "SwitchoverBlueGreenDeployment",
    ],
    group=GROUP,
)
