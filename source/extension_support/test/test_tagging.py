# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from extension_support.tagging import get_tags, to_cloudformation_tags


def test_get_tags_reserved_tags(service_context):
    assert get_tags(service_context) == {
        "app": "FakeApp",
        "env": "FakeEnv",
        "handel-service": "FakeService",
    }


def test_get_tags_precedence(service_context):
    service_context.account_config.handel_resource_tags = {
        "team": "platform",
        "cost-center": "1234",
    }
    service_context.params["tags"] = {"team": "messaging", "app": "ignored"}

    tags = get_tags(service_context)

    assert tags["team"] == "messaging"
    assert tags["cost-center"] == "1234"
    assert tags["app"] == "FakeApp"


def test_to_cloudformation_tags():
    assert to_cloudformation_tags({"app": "FakeApp", "count": 3}) == [
        {"Key": "app", "Value": "FakeApp"},
        {"Key": "count", "Value": "3"},
    ]
