# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

import pytest

from flowblocks.core.aws.common import AppConfig


@pytest.fixture
def static_app_config():
    return AppConfig(access_key_id="AKIASTATIC", secret_access_key="static-secret", session_token="static-token")


@pytest.fixture(autouse=True)
def _flowblocks_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="flowblocks")
    yield
