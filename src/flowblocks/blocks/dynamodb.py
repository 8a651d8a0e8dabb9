# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "dynamodb"

blocks = define_service_blocks(
    "dynamodb",
    [
        "BatchExecuteStatement",
        "CreateGlobalTable",
        "DeleteItem",
        "DescribeBackup",
        "DescribeTableReplicaAutoScaling",
        "TransactGetItems",
        "UpdateGlobalTable",
        "UpdateGlobalTableSettings",
        "UpdateItem",
        "UpdateTableReplicaAutoScaling",
    ],
    group=GROUP,
)
