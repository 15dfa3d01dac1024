# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import boto3
from extension_support.sns_calls import subscribe_to_topic
from moto import mock_aws

REGION = "us-east-1"


@mock_aws
def test_subscribe_queue_to_topic():
    sns = boto3.client("sns", region_name=REGION)
    sqs = boto3.client("sqs", region_name=REGION)
    topic_arn = sns.create_topic(Name="FakeTopic")["TopicArn"]
    queue_url = sqs.create_queue(QueueName="FakeQueue")["QueueUrl"]
    queue_arn = sqs.get_queue_attributes(
        QueueUrl=queue_url, AttributeNames=["QueueArn"]
    )["Attributes"]["QueueArn"]

    subscription_arn = subscribe_to_topic(topic_arn, "sqs", queue_arn, REGION)

    subscriptions = sns.list_subscriptions_by_topic(TopicArn=topic_arn)["Subscriptions"]
    assert len(subscriptions) == 1
    assert subscriptions[0]["SubscriptionArn"] == subscription_arn
    assert subscriptions[0]["Protocol"] == "sqs"
    assert subscriptions[0]["Endpoint"] == queue_arn
