# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Optional

from extension_support.awsapi_cached_client import AWSCachedClient
from extension_support.powertools_logger import get_logger

logger = get_logger("sns_calls")


def subscribe_to_topic(
    topic_arn: str, protocol: str, endpoint: str, region: Optional[str] = None
) -> str:
    """Subscribe an endpoint to a topic, returning the subscription ARN"""
    sns = AWSCachedClient(region).get_connection("sns")
    response = sns.subscribe(
        TopicArn=topic_arn,
        Protocol=protocol,
        Endpoint=endpoint,
        ReturnSubscriptionArn=True,
    )
    subscription_arn = response["SubscriptionArn"]
    logger.info(f"Subscribed {protocol} endpoint '{endpoint}' to topic '{topic_arn}'")
    return subscription_arn
