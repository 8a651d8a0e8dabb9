# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from ipaddress import ip_address
from urllib.parse import urlparse

from validators import domain

module_logger = logging.getLogger(__name__)

SUPPORTED_ENDPOINT_SCHEMES = ("http", "https")


def validate_endpoint_url(url: str) -> bool:
    """
    Validate a custom AWS endpoint override (e.g "https://s3.us-west-2.amazonaws.com" or "http://localhost:4566").

    Unlike user provided data URLs, endpoint overrides commonly point at local emulators, so localhost and IP addresses
    are accepted here. The URL must have an http(s) scheme and a host which is either localhost, an IP address or a
    valid domain name.
    """
    try:
        url_object = urlparse(url)
        # accessing the port triggers validation of the port section
        url_object.port
    except (ValueError, TypeError, AttributeError):
        module_logger.critical("Endpoint validation: cannot parse %r", url)
        return False

    if url_object.scheme.lower() not in SUPPORTED_ENDPOINT_SCHEMES:
        module_logger.critical("Endpoint validation: unsupported scheme in %r", url)
        return False

    host = url_object.hostname
    if not host:
        module_logger.critical("Endpoint validation: missing host in %r", url)
        return False

    if host.lower() == "localhost":
        return True

    try:
        ip_address(host)
        return True
    except ValueError:
        pass

    if domain(host):
        module_logger.debug("Endpoint validation: domain in %r is valid.", url)
        return True

    # single label hosts (e.g docker-compose service names such as "localstack")
    if "." not in host and host.replace("-", "").isalnum() and not host.startswith("-") and not host.endswith("-"):
        return True

    module_logger.critical("Endpoint validation: invalid domain name in %r", url)
    return False
