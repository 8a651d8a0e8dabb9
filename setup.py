# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from setuptools import find_packages, setup
from src.flowblocks import __version__ as version

cmdclass_value = {}
options_value = {}

REQUIRED_PACKAGES = [
    # catalog needs recent service models (CloudFront tenants, CloudFormation stack refactors, etc)
    'boto3 >= 1.40.0',
    'botocore >= 1.40.0',
    'validators >= 0.20.0',
]

TEST_PACKAGES = [
    'moto >= 5.0.0',
    'pytest',
    'mock'
]

setup(
    name="flowblocks-aws",
    python_requires=">=3.10",
    version=version,
    description="flowblocks-aws exposes single AWS API operations as blocks for workflow automation hosts.",
    keywords="aws cloud workflow automation blocks boto3 sts assume-role low-code",
    author="Amazon.com Inc.",
    license="Apache 2.0",

    packages=find_packages(where="src", exclude=("test",)),
    package_dir={"": "src"},
    install_requires=REQUIRED_PACKAGES,
    tests_require=TEST_PACKAGES,
    extras_require={"test": TEST_PACKAGES},
    test_suite='test',

    include_package_data=True,

    options=options_value,
    cmdclass=cmdclass_value,
)
