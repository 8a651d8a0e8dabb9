# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "ses"

blocks = define_service_blocks(
    "ses",
    [
        "CreateConfigurationSetEventDestination",
        "DescribeActiveReceiptRuleSet",
        "DescribeConfigurationSet",
        "DescribeReceiptRule",
        "DescribeReceiptRuleSet",
        "SendBounce",
        "SendBulkTemplatedEmail",
        "SendEmail",
    ],
    group=GROUP,
)
