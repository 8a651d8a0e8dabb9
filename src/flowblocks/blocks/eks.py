# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "eks"

blocks = define_service_blocks(
    "eks",
    [
        "AssociateEncryptionConfig",
        "CreateAccessEntry",
        "CreateAddon",
        "CreateNodegroup",
        "CreatePodIdentityAssociation",
        "DeleteAddon",
        "DeleteFargateProfile",
        "DescribeAddonVersions",
        "DescribeInsight",
        "DescribeNodegroup",
        "ListEksAnywhereSubscriptions",
        "UpdateClusterConfig",
        "UpdateNodegroupConfig",
        "UpdateNodegroupVersion",
        "UpdatePodIdentityAssociation",
    ],
    group=GROUP,
)
