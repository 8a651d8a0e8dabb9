# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "ec2-capacity"

blocks = define_service_blocks(
    "ec2",
    [
        "AllocateHosts",
        "CancelReservedInstancesListing",
        "CreateCapacityReservation",
        "CreatePlacementGroup",
        "DescribeCapacityBlockExtensionOfferings",
        "DescribeCapacityReservationBillingRequests",
        "DescribeCapacityReservationFleets",
        "DescribeHostReservationOfferings",
        "DescribeHostReservations",
        "DescribeHosts",
        "DescribeReservedInstancesListings",
        "DescribeReservedInstancesModifications",
        "DescribeReservedInstancesOfferings",
        "GetReservedInstancesExchangeQuote",
        "PurchaseCapacityBlock",
        "PurchaseHostReservation",
    ],
    group=GROUP,
)
