"""Task DNS registration.

Runs the full registration of the current task: discover the task ARN, resolve
its ENI public IP and upsert the Route53 A record. Calls are made strictly in
sequence and nothing is retried.
"""

import logging
from dataclasses import dataclass

from opentelemetry import trace

from application.services.dns_record_publisher import DnsRecordPublisher
from application.services.task_address_resolver import TaskAddressResolver
from application.settings import Settings
from domain.enums import DiscoveryMode
from integration.models import ChangeInfo
from integration.providers.factory import Providers

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class RegistrationResult:
    task_arn: str

    network_interface_id: str

    public_ip: str

    hosted_zone_id: str

    change_info: ChangeInfo


class TaskDnsRegistrationService:
    def __init__(self, providers: Providers, settings: Settings):
        self.settings = settings
        self.resolver = TaskAddressResolver(
            ecs_provider=providers.ecs,
            network_interface_provider=providers.ec2,
            metadata_client=providers.metadata,
        )
        self.publisher = DnsRecordPublisher(dns_zone_provider=providers.route53)

    async def discover_task_arn_async(self) -> str:
        """Identify the task to register using the configured discovery mode."""
        if self.settings.discovery_mode == DiscoveryMode.CLUSTER_LISTING:
            return await self.resolver.get_first_cluster_task_arn_async(self.settings.cluster_name)
        return await self.resolver.get_current_task_arn_async(self.settings.ecs_container_metadata_uri_v4)

    async def register_async(self) -> RegistrationResult:
        """Run discover -> resolve -> publish once.

        Raises:
            RegistrationException: On the first failing step; later steps are not attempted
        """
        with tracer.start_as_current_span("register_task_dns") as span:
            span.set_attribute("ecs.cluster", self.settings.cluster_name)
            span.set_attribute("route53.domain", self.settings.domain)
            span.set_attribute("registrar.discovery_mode", self.settings.discovery_mode.value)

            task_arn = await self.discover_task_arn_async()
            eni, public_ip = await self.resolver.resolve_public_ip_async(self.settings.cluster_name, task_arn)
            published = await self.publisher.publish_async(self.settings.domain, public_ip)

        return RegistrationResult(
            task_arn=task_arn,
            network_interface_id=eni,
            public_ip=public_ip,
            hosted_zone_id=published.hosted_zone_id,
            change_info=published.change_info,
        )
