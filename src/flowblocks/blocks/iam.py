# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "iam"

blocks = define_service_blocks(
    "iam",
    [
        "CreateServiceLinkedRole",
        "CreateVirtualMFADevice",
        "ListEntitiesForPolicy",
        "ListPoliciesGrantingServiceAccess",
        "ListRoles",
        "ListUsers",
        "ListVirtualMFADevices",
        "UploadServerCertificate",
    ],
    group=GROUP,
)
