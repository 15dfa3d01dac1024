# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import os

import pytest
from extension_support.awsapi_cached_client import AWSCachedClient
from extension_support.contexts import AccountConfig, ServiceContext, ServiceType


@pytest.fixture(scope="module", autouse=True)
def aws_credentials():
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
    os.environ["SOLUTION_ID"] = "SOTestID"


@pytest.fixture(autouse=True)
def clear_cached_clients():
    # clients created outside a moto mock would keep talking to it after it stops
    AWSCachedClient.clear()
    yield
    AWSCachedClient.clear()


@pytest.fixture
def account_config():
    return AccountConfig(account_id="123456789012", region="us-east-1")


@pytest.fixture
def service_context(account_config):
    return ServiceContext(
        "FakeApp",
        "FakeEnv",
        "FakeService",
        ServiceType("snsExtension", "sns"),
        {"type": "sns"},
        account_config,
    )
