# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import os
from typing import Any, Optional

import boto3
from botocore.config import Config

DEFAULT_REGION = "us-east-1"


def get_default_region() -> str:
    return os.getenv("AWS_REGION", os.getenv("AWS_DEFAULT_REGION", DEFAULT_REGION))


class AWSCachedClient:
    """
    Maintains a hash of AWS API Client connections by region and service
    """

    region: Optional[str] = ""
    client: dict[str, Any] = {}
    solution_id = ""
    solution_version = "undefined"

    def __init__(self, region: Optional[str] = None) -> None:
        """
        Region is the default for get_connection. When omitted, the region
        comes from the environment.
        """
        self.solution_id = os.getenv("SOLUTION_ID", "handel-sns")
        self.solution_version = os.getenv("SOLUTION_VERSION", "undefined")
        self.region = region or get_default_region()
        self.boto_config = Config(
            user_agent_extra=(
                f"HandelExtension/{self.solution_id}/{self.solution_version}"
            ),
            retries={"max_attempts": 10, "mode": "standard"},
        )

    def get_connection(self, service: str, region: Optional[str] = None) -> Any:
        """Connect to AWS api"""

        if not region:
            region = self.region

        if service not in self.client:
            self.client[service] = {}

        if region not in self.client[service]:
            self.client[service][region] = boto3.client(
                service, region_name=region, config=self.boto_config
            )

        return self.client[service][region]

    @classmethod
    def clear(cls) -> None:
        """Drop every cached connection"""
        cls.client.clear()
