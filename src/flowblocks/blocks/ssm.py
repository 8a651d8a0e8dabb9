# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "ssm"

blocks = define_service_blocks(
    "ssm",
    [
        "CreateActivation",
        "CreateMaintenanceWindow",
        "CreateOpsItem",
        "CreateResourceDataSync",
        "DescribeAssociationExecutionTargets",
        "DescribeAutomationExecutions",
        "DescribeAvailablePatches",
        "DescribeDocument",
        "DescribeInstanceAssociationsStatus",
        "DescribeInstanceInformation",
        "DescribeInstancePatchStates",
        "DescribeInstancePatchStatesForPatchGroup",
        "DescribeInstanceProperties",
        "DescribeMaintenanceWindowExecutionTaskInvocations",
        "DescribeMaintenanceWindowExecutionTasks",
        "DescribeMaintenanceWindowSchedule",
        "DescribeMaintenanceWindowTasks",
        "DescribeOpsItems",
        "DescribeParameters",
        "DescribePatchGroupState",
        "DescribeSessions",
        "GetCommandInvocation",
        "GetDeployablePatchSnapshotForInstance",
        "GetDocument",
        "GetInventory",
        "GetMaintenanceWindow",
        "GetMaintenanceWindowExecutionTask",
        "GetMaintenanceWindowTask",
        "GetOpsItem",
        "GetOpsSummary",
        "GetParameterHistory",
        "GetPatchBaseline",
        "ListAssociationVersions",
        "ListCommandInvocations",
        "ListCommands",
        "ListComplianceItems",
        "ListDocumentMetadataHistory",
        "ListDocuments",
        "ListNodesSummary",
        "ListResourceComplianceSummaries",
        "ListResourceDataSync",
        "PutParameter",
        "UpdateDocument",
        "UpdateMaintenanceWindowTarget",
        "UpdateOpsItem",
    ],
    group=GROUP,
)
