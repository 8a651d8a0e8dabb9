# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from flowblocks.core.block import define_service_blocks

GROUP = "cloudwatch"

blocks = define_service_blocks(
    "cloudwatch",
    [
        "DeleteAnomalyDetector",
        "DescribeAlarmHistory",
        "DescribeAlarmsForMetric",
        "GetMetricStatistics",
        "GetMetricStream",
        "ListMetrics",
        "PutAnomalyDetector",
        "PutMetricData",
        "PutMetricStream",
    ],
    group=GROUP,
)
