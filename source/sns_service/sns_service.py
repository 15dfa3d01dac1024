# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Service deployer that provisions an SNS topic for the services that depend on it"""

from pathlib import Path
from typing import Any, Dict, List, cast

from extension_support import deploy_phase, delete_phases, sns_calls, tagging
from extension_support.cloudformation import get_output
from extension_support.contexts import (
    DeployContext,
    DeployContextEventOutputs,
    PreDeployContext,
    ProduceEventsContext,
    ServiceContext,
    ServiceDeployer,
    UnDeployContext,
)
from extension_support.powertools_logger import get_logger
from extension_support.templates import compile_template
from sns_service.config_types import SnsServiceConfig

logger = get_logger("sns_service")

SERVICE_NAME = "SNS"
TEMPLATE_PATH = Path(__file__).parent / "sns-template.yml"
STACK_TIMEOUT_MINUTES = 30

ALLOWED_PROTOCOLS = ["http", "https", "email", "email-json", "sms"]

TOPIC_ACTIONS = [
    "sns:ConfirmSubscription",
    "sns:GetEndpointAttributes",
    "sns:GetPlatformApplicationAttributes",
    "sns:GetSMSAttributes",
    "sns:GetSubscriptionAttributes",
    "sns:GetTopicAttributes",
    "sns:ListEndpointsByPlatformApplication",
    "sns:ListPhoneNumbersOptedOut",
    "sns:ListSubscriptions",
    "sns:ListSubscriptionsByTopic",
    "sns:ListTopics",
    "sns:OptInPhoneNumber",
    "sns:Publish",
    "sns:Subscribe",
    "sns:Unsubscribe",
]

# consumer service type -> subscription protocol
EVENT_CONSUMER_PROTOCOLS = {
    "lambda": "lambda",
    "sqs": "sqs",
}


class MissingTopicOutputs(Exception):
    """The deployed stack did not report the topic name and ARN"""


class UnsupportedEventConsumer(Exception):
    pass


class MissingEventOutputs(Exception):
    pass


class SNSService(ServiceDeployer):
    consumed_deploy_output_types: List[str] = []
    produced_deploy_output_types = ["environmentVariables", "policies"]
    produced_events_supported_types = ["lambda", "sqs"]
    supports_tagging = True

    def check(
        self,
        service_context: ServiceContext,
        dependencies_service_contexts: List[ServiceContext],
    ) -> List[str]:
        errors = []
        params = cast(SnsServiceConfig, service_context.params)

        for subscription in params.get("subscriptions") or []:
            if not isinstance(subscription, dict):
                subscription = {}
            if not subscription.get("endpoint"):
                errors.append(
                    f"{SERVICE_NAME} - A subscription requires an 'endpoint' parameter"
                )
            protocol = subscription.get("protocol")
            if not protocol:
                errors.append(
                    f"{SERVICE_NAME} - A subscription requires a 'protocol' parameter"
                )
            elif protocol not in ALLOWED_PROTOCOLS:
                errors.append(
                    f"{SERVICE_NAME} - Protocol must be one of "
                    f"{', '.join(ALLOWED_PROTOCOLS)}"
                )

        return errors

    def deploy(
        self,
        own_service_context: ServiceContext,
        own_pre_deploy_context: PreDeployContext,
        dependencies_deploy_contexts: List[DeployContext],
    ) -> DeployContext:
        stack_name = own_service_context.stack_name()
        logger.info(f"{SERVICE_NAME} - Deploying topic '{stack_name}'")

        compiled_template = self._get_compiled_sns_template(
            stack_name, own_service_context
        )
        logger.debug(
            f"{SERVICE_NAME} - Rendered template for '{stack_name}'",
            template=compiled_template,
        )
        stack_tags = tagging.get_tags(own_service_context)
        deployed_stack = deploy_phase.deploy_cloudformation_stack(
            stack_name,
            compiled_template,
            [],
            True,
            SERVICE_NAME,
            STACK_TIMEOUT_MINUTES,
            stack_tags,
            region=own_service_context.account_config.region,
        )
        logger.info(f"{SERVICE_NAME} - Finished deploying topic '{stack_name}'")
        return self._get_deploy_context(own_service_context, deployed_stack)

    def produce_events(
        self,
        own_service_context: ServiceContext,
        own_deploy_context: DeployContext,
        event_consumer_config: Dict[str, Any],
        consumer_service_context: ServiceContext,
        consumer_deploy_context: DeployContext,
    ) -> ProduceEventsContext:
        logger.info(
            f"{SERVICE_NAME} - Producing events from "
            f"'{own_service_context.service_name}' "
            f"for consumer '{consumer_service_context.service_name}'"
        )
        consumer_type = consumer_service_context.service_type.name
        protocol = EVENT_CONSUMER_PROTOCOLS.get(consumer_type)
        if not protocol:
            raise UnsupportedEventConsumer(
                f"{SERVICE_NAME} - Unsupported event consumer type given: "
                f"{consumer_type}"
            )
        topic_outputs = own_deploy_context.event_outputs
        consumer_outputs = consumer_deploy_context.event_outputs
        if not (topic_outputs and topic_outputs.resource_arn) or not (
            consumer_outputs and consumer_outputs.resource_arn
        ):
            raise MissingEventOutputs(
                f"{SERVICE_NAME} - Expected event outputs from both "
                f"'{own_service_context.service_name}' and "
                f"'{consumer_service_context.service_name}'"
            )

        sns_calls.subscribe_to_topic(
            topic_outputs.resource_arn,
            protocol,
            consumer_outputs.resource_arn,
            own_service_context.account_config.region,
        )
        logger.info(
            f"{SERVICE_NAME} - Configured production of events from "
            f"'{own_service_context.service_name}' for consumer "
            f"'{consumer_service_context.service_name}'"
        )
        return ProduceEventsContext(own_service_context, consumer_service_context)

    def un_deploy(self, own_service_context: ServiceContext) -> UnDeployContext:
        return delete_phases.un_deploy_service(own_service_context, SERVICE_NAME)

    def _get_compiled_sns_template(
        self, stack_name: str, service_context: ServiceContext
    ) -> str:
        params = cast(SnsServiceConfig, service_context.params)
        template_params = {
            "subscriptions": params.get("subscriptions") or [],
            "topicName": stack_name,
        }
        return compile_template(TEMPLATE_PATH, template_params)

    def _get_deploy_context(
        self, service_context: ServiceContext, cf_stack: Dict[str, Any]
    ) -> DeployContext:
        topic_name = get_output("TopicName", cf_stack)
        topic_arn = get_output("TopicArn", cf_stack)
        if not topic_name or not topic_arn:
            raise MissingTopicOutputs(
                "Expected to receive topic name and ARN back from SNS service"
            )

        deploy_context = DeployContext(service_context)

        # Env variables to inject into consuming services
        deploy_context.add_environment_variables(
            {
                "TOPIC_ARN": topic_arn,
                "TOPIC_NAME": topic_name,
            }
        )

        deploy_context.policies.append(
            {
                "Effect": "Allow",
                "Action": list(TOPIC_ACTIONS),
                "Resource": [topic_arn],
            }
        )

        deploy_context.event_outputs = DeployContextEventOutputs(
            resource_arn=topic_arn,
            resource_name=topic_name,
            resource_principal="sns.amazonaws.com",
            service_event_type="sns",
        )

        return deploy_context
