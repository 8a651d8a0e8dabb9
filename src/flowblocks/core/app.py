# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from collections import OrderedDict

from flowblocks.core.aws.common import AppConfigParams

# host facing definition of the application level config shared by all of the blocks
APP_CONFIG_FIELDS = OrderedDict(
    [
        (
            AppConfigParams.ACCESS_KEY_ID.value,
            {
                "name": "Access Key ID",
                "description": "AWS access key ID used by the blocks (and to assume roles when a block asks for it).",
                "type": "string",
                "required": True,
            },
        ),
        (
            AppConfigParams.SECRET_ACCESS_KEY.value,
            {
                "name": "Secret Access Key",
                "description": "AWS secret access key paired with the access key ID.",
                "type": "string",
                "required": True,
                "sensitive": True,
            },
        ),
        (
            AppConfigParams.SESSION_TOKEN.value,
            {
                "name": "Session Token",
                "description": "Optional session token for temporary credentials.",
                "type": "string",
                "required": False,
                "sensitive": True,
            },
        ),
        (
            AppConfigParams.ENDPOINT.value,
            {
                "name": "Endpoint",
                "description": "Optional custom endpoint URL for AWS service calls (e.g a local emulator).",
                "type": "string",
                "required": False,
            },
        ),
    ]
)
