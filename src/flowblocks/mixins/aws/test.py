# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import os

import boto3
import pytest
from moto import mock_aws

from flowblocks.core.aws.common import AppConfig


class AWSTestBase:
    testing_keyname = "testing"
    region = "us-east-1"
    # default moto acc id
    account_id = "123456789012"
    role_arn = f"arn:aws:iam::{account_id}:role/FlowBlocksTestRole"

    @pytest.fixture(scope="class")
    def aws_credentials(self):
        os.environ["AWS_ACCESS_KEY_ID"] = self.testing_keyname
        os.environ["AWS_SECRET_ACCESS_KEY"] = self.testing_keyname
        os.environ["AWS_SECURITY_TOKEN"] = self.testing_keyname
        os.environ["AWS_SESSION_TOKEN"] = self.testing_keyname
        os.environ["AWS_DEFAULT_REGION"] = self.region

    @pytest.fixture
    def app_config(self) -> AppConfig:
        return AppConfig(
            access_key_id=self.testing_keyname,
            secret_access_key=self.testing_keyname,
            session_token=self.testing_keyname,
        )

    @pytest.fixture
    def mocked_aws(self, aws_credentials):
        with mock_aws():
            yield

    @pytest.fixture
    def sqs_client(self, mocked_aws):
        yield boto3.client(service_name="sqs", region_name=self.region)

    @pytest.fixture
    def s3_client(self, mocked_aws):
        yield boto3.client(service_name="s3", region_name=self.region)

    @pytest.fixture
    def iam_client(self, mocked_aws):
        yield boto3.client(service_name="iam", region_name=self.region)
