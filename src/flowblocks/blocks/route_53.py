# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "route-53"

blocks = define_service_blocks(
    "route53",
    [
        "ChangeResourceRecordSets",
        "CreateHealthCheck",
        "CreateHostedZone",
        "CreateKeySigningKey",
        "CreateTrafficPolicyInstance",
        "GetHealthCheck",
        "ListGeoLocations",
        "ListHostedZones",
        "ListHostedZonesByName",
        "ListResourceRecordSets",
        "TestDNSAnswer",
    ],
    group=GROUP,
)
