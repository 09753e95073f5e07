"""Route53 A record publishing."""

import logging
from dataclasses import dataclass

from opentelemetry import trace

from application.exceptions import RemoteCallFailedException, ResourceNotFoundException
from integration.exceptions import IntegrationException
from integration.models import ChangeInfo
from integration.providers.interfaces import DnsZoneProvider

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

RECORD_TTL_SECONDS = 300


@dataclass
class PublishedRecord:
    hosted_zone_id: str

    change_info: ChangeInfo


class DnsRecordPublisher:
    """Upserts the A record for the target domain.

    The record always goes to the first hosted zone Route53 lists; zones are not matched
    against the domain name. Every call upserts, even when the record already holds the
    same address.
    """

    def __init__(self, dns_zone_provider: DnsZoneProvider):
        self.dns_zone_provider = dns_zone_provider

    async def publish_async(self, domain: str, public_ip: str) -> PublishedRecord:
        """Point ``domain`` at ``public_ip``.

        Args:
            domain: Record name
            public_ip: Address for the record's single value

        Returns:
            The hosted zone used and the change info Route53 reported

        Raises:
            RemoteCallFailedException: If listing zones or changing the record set fails
            ResourceNotFoundException: If the account has no hosted zones
        """
        with tracer.start_as_current_span("publish_address_record") as span:
            span.set_attribute("route53.domain", domain)
            span.set_attribute("route53.address", public_ip)

            try:
                hosted_zones = await self.dns_zone_provider.list_hosted_zones()
            except IntegrationException as e:
                raise RemoteCallFailedException(f"error listing hosted zones: {e}") from e

            if not hosted_zones:
                raise ResourceNotFoundException("no hosted zones found")

            hosted_zone_id = hosted_zones[0].id
            span.set_attribute("route53.hosted_zone_id", hosted_zone_id)
            log.info(f"Upserting A record '{domain}' -> {public_ip} in hosted zone '{hosted_zone_id}'")

            try:
                change_info = await self.dns_zone_provider.upsert_address_record(
                    hosted_zone_id, domain, public_ip, RECORD_TTL_SECONDS
                )
            except IntegrationException as e:
                raise RemoteCallFailedException(
                    f"error changing the resource set in Route53 hosted zone '{hosted_zone_id}' "
                    f"with domain '{domain}': {e}"
                ) from e

            span.set_attribute("route53.change_status", change_info.status.value)

        return PublishedRecord(hosted_zone_id=hosted_zone_id, change_info=change_info)
