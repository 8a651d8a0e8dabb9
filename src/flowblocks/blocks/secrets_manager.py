# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "secrets-manager"

blocks = define_service_blocks(
    "secretsmanager",
    [
        "BatchGetSecretValue",
        "CreateSecret",
        "ListSecrets",
    ],
    group=GROUP,
)
