# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import os

import pytest
from extension_support.awsapi_cached_client import AWSCachedClient
from extension_support.contexts import AccountConfig, ServiceContext, ServiceType
from sns_service.config_types import SnsServiceConfig

APP_NAME = "FakeApp"
ENV_NAME = "FakeEnv"
SERVICE_NAME = "FakeService"
SERVICE_TYPE = "sns"


@pytest.fixture(scope="module", autouse=True)
def aws_credentials():
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture(autouse=True)
def clear_cached_clients():
    AWSCachedClient.clear()
    yield
    AWSCachedClient.clear()


@pytest.fixture
def account_config():
    return AccountConfig.from_dict(
        {
            "account_id": "123456789012",
            "region": "us-east-1",
            "vpc": "vpc-aaaaaaaa",
            "private_subnets": ["subnet-aaaaaaaa"],
        }
    )


@pytest.fixture
def service_params():
    return SnsServiceConfig(
        type=SERVICE_TYPE,
        subscriptions=[{"protocol": "http", "endpoint": "fakeendpoint"}],
    )


@pytest.fixture
def service_context(service_params, account_config):
    return ServiceContext(
        APP_NAME,
        ENV_NAME,
        SERVICE_NAME,
        ServiceType("snsExtension", SERVICE_TYPE),
        service_params,
        account_config,
    )
