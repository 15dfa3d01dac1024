# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any, Dict, List, Optional

from extension_support import cloudformation
from extension_support.powertools_logger import get_logger
from extension_support.tagging import to_cloudformation_tags

logger = get_logger("deploy_phase")


def deploy_cloudformation_stack(
    stack_name: str,
    template_body: str,
    parameters: List[Dict[str, str]],
    updates_supported: bool,
    service_type: str,
    timeout_in_minutes: int = cloudformation.DEFAULT_TIMEOUT_MINUTES,
    tags: Optional[Dict[str, str]] = None,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create the stack if it doesn't exist yet, otherwise update it when the
    service type supports updates. Returns the resulting stack description.
    """
    stack_tags = to_cloudformation_tags(tags or {})
    stack = cloudformation.get_stack(stack_name, region)

    if not stack:
        logger.info(f"{service_type} - Creating stack '{stack_name}'")
        created = cloudformation.create_stack(
            stack_name,
            template_body,
            parameters,
            timeout_in_minutes,
            stack_tags,
            region,
        )
        logger.info(f"{service_type} - Created stack '{stack_name}'")
        return created

    if not updates_supported:
        logger.warning(
            f"{service_type} - Updates are not supported for this service, "
            f"leaving stack '{stack_name}' as is"
        )
        return stack

    logger.info(f"{service_type} - Updating stack '{stack_name}'")
    updated = cloudformation.update_stack(
        stack_name,
        template_body,
        parameters,
        stack_tags,
        timeout_in_minutes,
        region,
    )
    logger.info(f"{service_type} - Updated stack '{stack_name}'")
    return updated
