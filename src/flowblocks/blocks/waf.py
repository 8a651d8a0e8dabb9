# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "waf"

blocks = define_service_blocks(
    "waf",
    [
        "CreateRateBasedRule",
        "CreateWebACL",
        "ListActivatedRulesInRuleGroup",
    ],
    group=GROUP,
)
