# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Dict, List

from extension_support.contexts import ServiceContext


def get_tags(service_context: ServiceContext) -> Dict[str, str]:
    """
    Tags for the service's resources. Account-wide tags come first, then the
    service's own tags, and the reserved app/env/service tags always win.
    """
    tags: Dict[str, str] = {}
    tags.update(service_context.account_config.handel_resource_tags)
    tags.update(service_context.tags)
    tags.update(service_context.params.get("tags") or {})
    tags["app"] = service_context.app_name
    tags["env"] = service_context.environment_name
    tags["handel-service"] = service_context.service_name
    return tags


def to_cloudformation_tags(tags: Dict[str, str]) -> List[Dict[str, str]]:
    return [{"Key": key, "Value": str(value)} for key, value in tags.items()]
