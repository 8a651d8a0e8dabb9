# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "ecr"

blocks = define_service_blocks(
    "ecr",
    [
        "BatchGetImage",
        "CreatePullThroughCacheRule",
        "CreateRepository",
        "DeleteRepositoryCreationTemplate",
        "DescribeImageScanFindings",
        "DescribeRepositories",
        "UpdateRepositoryCreationTemplate",
    ],
    group=GROUP,
)
