# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from extension_support import cloudformation
from extension_support.contexts import ServiceContext, UnDeployContext
from extension_support.powertools_logger import get_logger

logger = get_logger("delete_phases")


def un_deploy_service(
    service_context: ServiceContext, service_type: str
) -> UnDeployContext:
    """Delete the service's CloudFormation stack if there is one"""
    stack_name = service_context.stack_name()
    region = service_context.account_config.region
    logger.info(f"{service_type} - Executing UnDeploy on '{stack_name}'")

    stack = cloudformation.get_stack(stack_name, region)
    if stack:
        logger.info(f"{service_type} - Deleting stack '{stack_name}'")
        cloudformation.delete_stack(stack_name, region)
        logger.info(f"{service_type} - Finished deleting stack '{stack_name}'")
    else:
        logger.info(f"{service_type} - Stack '{stack_name}' has already been deleted")

    return UnDeployContext(service_context)
