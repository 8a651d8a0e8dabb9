# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "cloudformation"

blocks = define_service_blocks(
    "cloudformation",
    [
        "ActivateType",
        "BatchDescribeTypeConfigurations",
        "CreateStackRefactor",
        "DescribeChangeSetHooks",
        "DescribeGeneratedTemplate",
        "DescribeStackEvents",
        "DescribeStackInstance",
        "DescribeStackResource",
        "DescribeStackResources",
        "DescribeStackSet",
        "DescribeStackSetOperation",
        "DetectStackResourceDrift",
        "ListStackInstanceResourceDrifts",
        "ListStackInstances",
        "ListStackRefactorActions",
        "ListStackResources",
        "ListStackSetOperationResults",
        "ListStackSets",
        "UpdateStack",
    ],
    group=GROUP,
)
