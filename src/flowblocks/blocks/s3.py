# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "s3"

blocks = define_service_blocks(
    "s3",
    [
        "CreateBucket",
        "CreateSession",
        "DeleteObjects",
        "GetBucketInventoryConfiguration",
        "GetBucketLifecycleConfiguration",
        "GetBucketMetadataTableConfiguration",
        "GetBucketNotificationConfiguration",
        "GetBucketReplication",
        "GetBucketWebsite",
        "GetObject",
        "ListBucketAnalyticsConfigurations",
        "ListBucketIntelligentTieringConfigurations",
        "ListBucketInventoryConfigurations",
        "ListObjectsV2",
        "ListParts",
        "PutBucketAcl",
        "PutBucketIntelligentTieringConfiguration",
        "PutBucketLifecycleConfiguration",
        "PutBucketLogging",
        "PutBucketNotificationConfiguration",
        "PutBucketReplication",
        "PutBucketWebsite",
        "PutObjectAcl",
    ],
    group=GROUP,
    serialize_response=True,
)
