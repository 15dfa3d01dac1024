# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""CloudFormation stack calls shared by the service deployers"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from botocore.exceptions import ClientError, WaiterError
from extension_support.awsapi_cached_client import AWSCachedClient
from extension_support.powertools_logger import get_logger

if TYPE_CHECKING:
    from mypy_boto3_cloudformation.client import CloudFormationClient
else:
    CloudFormationClient = object

logger = get_logger("cloudformation")

STACK_CAPABILITIES = ["CAPABILITY_IAM", "CAPABILITY_NAMED_IAM"]
WAITER_DELAY_SECONDS = 15
DEFAULT_TIMEOUT_MINUTES = 30
NO_UPDATES_MESSAGE = "No updates are to be performed"


class StackOperationFailed(Exception):
    pass


def connect_to_cloudformation(region: Optional[str] = None) -> CloudFormationClient:
    return AWSCachedClient(region).get_connection("cloudformation")


def _waiter_config(timeout_in_minutes: int) -> Dict[str, int]:
    max_attempts = max(1, (timeout_in_minutes * 60) // WAITER_DELAY_SECONDS)
    return {"Delay": WAITER_DELAY_SECONDS, "MaxAttempts": max_attempts}


def get_stack(
    stack_name: str, region: Optional[str] = None
) -> Optional[Dict[str, Any]]:
    """
    Return the description of the named stack, or None if it does not exist
    """
    cfn = connect_to_cloudformation(region)
    try:
        response = cfn.describe_stacks(StackName=stack_name)
    except ClientError as e:
        error = e.response["Error"]
        if error["Code"] == "ValidationError" and "does not exist" in error.get(
            "Message", ""
        ):
            return None
        raise
    stacks = response.get("Stacks", [])
    return stacks[0] if stacks else None


def _wait_for(
    cfn: CloudFormationClient,
    waiter_name: str,
    stack_name: str,
    timeout_in_minutes: int,
    action: str,
) -> None:
    try:
        cfn.get_waiter(waiter_name).wait(
            StackName=stack_name, WaiterConfig=_waiter_config(timeout_in_minutes)
        )
    except WaiterError as e:
        logger.error(f"Stack '{stack_name}' failed to {action}: {e}")
        raise StackOperationFailed(f"Failed to {action} stack '{stack_name}'") from e


def create_stack(
    stack_name: str,
    template_body: str,
    parameters: List[Dict[str, str]],
    timeout_in_minutes: int,
    tags: List[Dict[str, str]],
    region: Optional[str] = None,
) -> Dict[str, Any]:
    cfn = connect_to_cloudformation(region)
    cfn.create_stack(
        StackName=stack_name,
        TemplateBody=template_body,
        Parameters=parameters,
        Capabilities=STACK_CAPABILITIES,
        OnFailure="DELETE",
        TimeoutInMinutes=timeout_in_minutes,
        Tags=tags,
    )
    logger.info(f"Waiting for stack '{stack_name}' to be created")
    _wait_for(cfn, "stack_create_complete", stack_name, timeout_in_minutes, "create")
    return get_stack(stack_name, region)  # type: ignore[return-value]


def update_stack(
    stack_name: str,
    template_body: str,
    parameters: List[Dict[str, str]],
    tags: List[Dict[str, str]],
    timeout_in_minutes: int = DEFAULT_TIMEOUT_MINUTES,
    region: Optional[str] = None,
) -> Dict[str, Any]:
    cfn = connect_to_cloudformation(region)
    try:
        cfn.update_stack(
            StackName=stack_name,
            TemplateBody=template_body,
            Parameters=parameters,
            Capabilities=STACK_CAPABILITIES,
            Tags=tags,
        )
    except ClientError as e:
        if NO_UPDATES_MESSAGE in e.response["Error"].get("Message", ""):
            logger.info(f"No updates required for stack '{stack_name}'")
            return get_stack(stack_name, region)  # type: ignore[return-value]
        raise
    logger.info(f"Waiting for stack '{stack_name}' to be updated")
    _wait_for(cfn, "stack_update_complete", stack_name, timeout_in_minutes, "update")
    return get_stack(stack_name, region)  # type: ignore[return-value]


def delete_stack(
    stack_name: str,
    region: Optional[str] = None,
    timeout_in_minutes: int = DEFAULT_TIMEOUT_MINUTES,
) -> bool:
    cfn = connect_to_cloudformation(region)
    cfn.delete_stack(StackName=stack_name)
    logger.info(f"Waiting for stack '{stack_name}' to be deleted")
    _wait_for(cfn, "stack_delete_complete", stack_name, timeout_in_minutes, "delete")
    return True


def get_output(output_key: str, stack: Dict[str, Any]) -> Optional[str]:
    """Value of the named stack output, None when the stack has no such output"""
    for output in stack.get("Outputs", []):
        if output.get("OutputKey") == output_key:
            return output.get("OutputValue")
    return None
