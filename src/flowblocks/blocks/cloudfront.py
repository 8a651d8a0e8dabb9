# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "cloudfront"

blocks = define_service_blocks(
    "cloudfront",
    [
        "CopyDistribution",
        "CreateConnectionGroup",
        "CreateDistributionTenant",
        "CreateDistributionWithTags",
        "CreateFunction",
        "CreateOriginRequestPolicy",
        "CreateRealtimeLogConfig",
        "CreateVpcOrigin",
        "GetCachePolicy",
        "GetContinuousDeploymentPolicy",
        "GetContinuousDeploymentPolicyConfig",
        "GetDistributionConfig",
        "GetDistributionTenant",
        "GetFieldLevelEncryption",
        "GetResponseHeadersPolicyConfig",
        "GetStreamingDistributionConfig",
        "ListDistributionTenantsByCustomization",
        "ListFieldLevelEncryptionConfigs",
        "ListFunctions",
        "ListStreamingDistributions",
        "TestFunction",
        "UpdateConnectionGroup",
        "UpdateContinuousDeploymentPolicy",
        "UpdateDistribution",
        "UpdateFieldLevelEncryptionProfile",
        "UpdateRealtimeLogConfig",
        "UpdateStreamingDistribution",
    ],
    group=GROUP,
)
