# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Dict, List, NotRequired, TypedDict


class SnsSubscription(TypedDict, total=False):
    protocol: str
    endpoint: str


class SnsServiceConfig(TypedDict):
    type: str
    subscriptions: NotRequired[List[SnsSubscription]]
    tags: NotRequired[Dict[str, str]]
