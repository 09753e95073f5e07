"""Provider wiring.

Chooses live or stub providers from the runtime mode passed in at startup.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from application.exceptions import ConfigurationException
from domain.enums import RuntimeMode
from integration.providers.aws_providers import (
    AwsDnsZoneProvider,
    AwsEcsTaskProvider,
    AwsNetworkInterfaceProvider,
)
from integration.providers.interfaces import (
    DnsZoneProvider,
    EcsTaskProvider,
    MetadataEndpointClient,
    NetworkInterfaceProvider,
)
from integration.providers.metadata_endpoint_client import HttpMetadataEndpointClient
from integration.providers.stub_providers import (
    StubDnsZoneProvider,
    StubEcsTaskProvider,
    StubMetadataEndpointClient,
    StubNetworkInterfaceProvider,
)

if TYPE_CHECKING:
    from application.settings import Settings

log = logging.getLogger(__name__)


@dataclass
class Providers:
    ecs: EcsTaskProvider

    ec2: NetworkInterfaceProvider

    route53: DnsZoneProvider

    metadata: MetadataEndpointClient


class ProviderFactory:
    """Builds the provider set for one process."""

    def __init__(self, settings: "Settings"):
        self.settings = settings

    def create_providers(self) -> Providers:
        runtime_mode = self.settings.runtime_mode
        log.info(f"Wiring {runtime_mode.value} providers")
        if runtime_mode == RuntimeMode.STUB:
            return self._create_stub_providers()
        return self._create_aws_providers()

    def _create_stub_providers(self) -> Providers:
        return Providers(
            ecs=StubEcsTaskProvider(),
            ec2=StubNetworkInterfaceProvider(),
            route53=StubDnsZoneProvider(),
            metadata=StubMetadataEndpointClient(),
        )

    def _create_aws_providers(self) -> Providers:
        # One attempt per call: failures surface immediately instead of being retried by botocore.
        client_config = Config(
            connect_timeout=self.settings.aws_connect_timeout,
            read_timeout=self.settings.aws_read_timeout,
            retries={"total_max_attempts": 1},
        )
        try:
            session = self._create_session()
            ecs_client = session.client("ecs", config=client_config)
            ec2_client = session.client("ec2", config=client_config)
            route53_client = session.client("route53", config=client_config)
        except BotoCoreError as e:
            # e.g. NoRegionError or ProfileNotFound
            raise ConfigurationException(f"error creating AWS clients: {e}") from e
        return Providers(
            ecs=AwsEcsTaskProvider(ecs_client),
            ec2=AwsNetworkInterfaceProvider(ec2_client),
            route53=AwsDnsZoneProvider(route53_client),
            metadata=HttpMetadataEndpointClient(timeout=self.settings.metadata_request_timeout),
        )

    def _create_session(self) -> boto3.Session:
        # Explicit keys only when both are configured, otherwise the default credential chain applies
        session_kwargs: dict[str, Any] = {}
        if self.settings.aws_region:
            session_kwargs["region_name"] = self.settings.aws_region
        if self.settings.aws_access_key_id and self.settings.aws_secret_access_key:
            session_kwargs["aws_access_key_id"] = self.settings.aws_access_key_id
            session_kwargs["aws_secret_access_key"] = self.settings.aws_secret_access_key
            if self.settings.aws_session_token:
                session_kwargs["aws_session_token"] = self.settings.aws_session_token
        return boto3.Session(**session_kwargs)
