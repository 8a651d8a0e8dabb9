# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import time
from enum import Enum, unique
from typing import Any, Dict, Mapping, Optional

import boto3

from flowblocks.core.entity import CoreData
from flowblocks.utils.url_validation import validate_endpoint_url

module_logger = logging.getLogger(__name__)

# https://docs.aws.amazon.com/STS/latest/APIReference/API_AssumeRole.html
# RoleSessionName: [\w+=,.@-]{2,64}
ASSUME_ROLE_SESSION_NAME_PREFIX = "flows-session-"


@unique
class BlockConfigParams(str, Enum):
    """Block level parameters which are consumed by the block itself and never forwarded to the wrapped operation"""

    REGION = "region"
    ASSUME_ROLE_ARN = "assumeRoleArn"


@unique
class AppConfigParams(str, Enum):
    """Application level parameters supplied by the host (shared by all of the blocks)"""

    ACCESS_KEY_ID = "accessKeyId"
    SECRET_ACCESS_KEY = "secretAccessKey"
    SESSION_TOKEN = "sessionToken"
    ENDPOINT = "endpoint"


class AWSCredentials(CoreData):
    _REDACTED_FIELDS = frozenset({"secret_access_key", "session_token"})

    def __init__(self, access_key_id: str, secret_access_key: str, session_token: Optional[str] = None) -> None:
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.session_token = session_token

    def as_session_kwargs(self) -> Dict[str, Optional[str]]:
        return {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
            "aws_session_token": self.session_token,
        }


class AppConfig(CoreData):
    """Host application's configuration: static credentials and an optional endpoint override."""

    _REDACTED_FIELDS = frozenset({"secret_access_key", "session_token"})

    def __init__(
        self, access_key_id: str, secret_access_key: str, session_token: Optional[str] = None, endpoint: Optional[str] = None
    ) -> None:
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.session_token = session_token
        self.endpoint = endpoint

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "AppConfig":
        """Build from the host's camelCase app config (e.g {"accessKeyId": ..., "secretAccessKey": ...}).

        :raises ValueError: if one of the mandatory credential keys is missing
        """
        missing = [
            param.value for param in (AppConfigParams.ACCESS_KEY_ID, AppConfigParams.SECRET_ACCESS_KEY) if not config.get(param.value)
        ]
        if missing:
            raise ValueError(f"App config is missing mandatory credential parameters: {missing!r}")

        endpoint = config.get(AppConfigParams.ENDPOINT.value) or None
        if endpoint and not validate_endpoint_url(endpoint):
            # botocore has the final say on the endpoint when the client is created
            module_logger.warning("App config endpoint %r does not look like a valid URL, passing it to the clients as is.", endpoint)

        return cls(
            access_key_id=config[AppConfigParams.ACCESS_KEY_ID.value],
            secret_access_key=config[AppConfigParams.SECRET_ACCESS_KEY.value],
            session_token=config.get(AppConfigParams.SESSION_TOKEN.value) or None,
            endpoint=endpoint,
        )

    def credentials(self) -> AWSCredentials:
        return AWSCredentials(self.access_key_id, self.secret_access_key, self.session_token)


def generate_session_name() -> str:
    return f"{ASSUME_ROLE_SESSION_NAME_PREFIX}{int(time.time() * 1000)}"


def create_client(service_name: str, region: Optional[str], credentials: AWSCredentials, endpoint: Optional[str] = None):
    """
    Creates a brand new boto3 client for the service. A new boto3.Session is created for each call, so that no
    credentials or connections are shared across block invocations.

    :param service_name: boto3 service name (e.g 'sqs', 'route53')
    :param region: AWS region that the client is scoped to
    :param credentials: credentials to be used by the client
    :param endpoint: optional endpoint override (e.g local emulators)
    :return: boto3 client
    """
    session = boto3.Session(region_name=region, **credentials.as_session_kwargs())
    client_kwargs = {"endpoint_url": endpoint} if endpoint else {}
    return session.client(service_name, **client_kwargs)


def resolve_credentials(app_config: AppConfig, region: Optional[str], assume_role_arn: Optional[str] = None) -> AWSCredentials:
    """
    Decides on the credentials that a block should use against the target service.

    - no role: application's static credentials as is
    - role: STS::AssumeRole (authenticated with the static credentials) and the temporary credentials from it

    Assume role failures (bad ARN, trust policy, expired static credentials) are not retried and raised as is.
    """
    static_credentials = app_config.credentials()
    if not assume_role_arn:
        return static_credentials

    session_name = generate_session_name()
    module_logger.info("Assuming role %r with session name %r in region %r.", assume_role_arn, session_name, region)
    sts_client = create_client("sts", region, static_credentials, app_config.endpoint)
    try:
        response = sts_client.assume_role(RoleArn=assume_role_arn, RoleSessionName=session_name)
    except Exception:
        module_logger.exception("Couldn't assume role %r.", assume_role_arn)
        raise

    credentials = response["Credentials"]
    return AWSCredentials(
        access_key_id=credentials["AccessKeyId"],
        secret_access_key=credentials["SecretAccessKey"],
        session_token=credentials["SessionToken"],
    )
