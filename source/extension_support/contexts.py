# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Contract types shared by the deployment framework and its service deployers"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class AccountConfig:
    account_id: str
    region: str
    vpc: Optional[str] = None
    public_subnets: List[str] = field(default_factory=list)
    private_subnets: List[str] = field(default_factory=list)
    data_subnets: List[str] = field(default_factory=list)
    required_tags: List[str] = field(default_factory=list)
    handel_resource_tags: Dict[str, str] = field(default_factory=dict)
    permissions_boundary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountConfig":
        """Build from an account config mapping, ignoring unknown keys"""
        known = {name for name in cls.__dataclass_fields__}
        values = {key: value for key, value in data.items() if key in known}
        values["account_id"] = str(values.get("account_id", ""))
        return cls(**values)


@dataclass(frozen=True)
class ServiceType:
    prefix: str
    name: str

    def __str__(self):
        return f"{self.prefix}::{self.name}"


class ServiceContext:
    def __init__(
        self,
        app_name: str,
        environment_name: str,
        service_name: str,
        service_type: ServiceType,
        params: Dict[str, Any],
        account_config: AccountConfig,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self.app_name = app_name
        self.environment_name = environment_name
        self.service_name = service_name
        self.service_type = service_type
        self.params = params
        self.account_config = account_config
        self.tags = tags or {}

    def stack_name(self) -> str:
        return "-".join(
            [
                self.app_name,
                self.environment_name,
                self.service_name,
                self.service_type.name,
            ]
        )

    def injected_env_var_name(self, suffix: str) -> str:
        return f"{self.service_name}_{suffix}".upper().replace("-", "_")


class PreDeployContext:
    def __init__(self, service_context: ServiceContext) -> None:
        self.app_name = service_context.app_name
        self.environment_name = service_context.environment_name
        self.service_name = service_context.service_name
        self.service_type = service_context.service_type
        self.security_groups: List[Dict[str, Any]] = []


@dataclass
class DeployContextEventOutputs:
    resource_arn: Optional[str] = None
    resource_name: Optional[str] = None
    resource_principal: Optional[str] = None
    service_event_type: Optional[str] = None


class DeployContext:
    """
    Outputs of a deployed service that are handed to the services depending on it
    """

    def __init__(self, service_context: ServiceContext) -> None:
        self._service_context = service_context
        self.app_name = service_context.app_name
        self.environment_name = service_context.environment_name
        self.service_name = service_context.service_name
        self.service_type = service_context.service_type
        self.policies: List[Dict[str, Any]] = []
        self.environment_variables: Dict[str, str] = {}
        self.scripts: List[str] = []
        self.security_groups: List[Dict[str, Any]] = []
        self.event_outputs: Optional[DeployContextEventOutputs] = None

    def add_environment_variables(self, env_vars: Dict[str, str]) -> None:
        """Inject variables prefixed with the producing service's name"""
        for suffix, value in env_vars.items():
            name = self._service_context.injected_env_var_name(suffix)
            self.environment_variables[name] = value


class ProduceEventsContext:
    def __init__(
        self, producer_context: ServiceContext, consumer_context: ServiceContext
    ) -> None:
        self.producer_service_name = producer_context.service_name
        self.consumer_service_name = consumer_context.service_name


class UnDeployContext:
    def __init__(self, service_context: ServiceContext) -> None:
        self.app_name = service_context.app_name
        self.environment_name = service_context.environment_name
        self.service_name = service_context.service_name
        self.service_type = service_context.service_type


class ServiceDeployer:
    """Phases a deployer does not support raise NotImplementedError"""

    consumed_deploy_output_types: List[str] = []
    produced_deploy_output_types: List[str] = []
    produced_events_supported_types: List[str] = []
    supports_tagging = False

    def check(
        self,
        service_context: ServiceContext,
        dependencies_service_contexts: List[ServiceContext],
    ) -> List[str]:
        return []

    def deploy(
        self,
        own_service_context: ServiceContext,
        own_pre_deploy_context: PreDeployContext,
        dependencies_deploy_contexts: List[DeployContext],
    ) -> DeployContext:
        raise NotImplementedError

    def produce_events(
        self,
        own_service_context: ServiceContext,
        own_deploy_context: DeployContext,
        event_consumer_config: Dict[str, Any],
        consumer_service_context: ServiceContext,
        consumer_deploy_context: DeployContext,
    ) -> ProduceEventsContext:
        raise NotImplementedError

    def un_deploy(self, own_service_context: ServiceContext) -> UnDeployContext:
        raise NotImplementedError
