"""Tests for DnsRecordPublisher."""

import pytest

from application.exceptions import RemoteCallFailedException, ResourceNotFoundException
from application.services.dns_record_publisher import RECORD_TTL_SECONDS, DnsRecordPublisher
from domain.enums import ChangeStatus
from integration.exceptions import RemoteCallException
from tests.fixtures.factories import ProviderResponseFactory as factory


@pytest.fixture
def publisher(route53_provider):
    return DnsRecordPublisher(dns_zone_provider=route53_provider)


@pytest.mark.asyncio
@pytest.mark.unit
class TestDnsRecordPublisher:
    async def test_list_hosted_zones_error(self, publisher, route53_provider):
        route53_provider.script("list_hosted_zones", error=RemoteCallException("some error"))

        with pytest.raises(RemoteCallFailedException) as exc_info:
            await publisher.publish_async("domain", "ip")

        assert str(exc_info.value) == "error listing hosted zones: some error"
        assert route53_provider.operations() == ["list_hosted_zones"]

    async def test_no_hosted_zones(self, publisher, route53_provider):
        route53_provider.script("list_hosted_zones", [])

        with pytest.raises(ResourceNotFoundException) as exc_info:
            await publisher.publish_async("domain", "ip")

        assert str(exc_info.value) == "no hosted zones found"
        assert route53_provider.operations() == ["list_hosted_zones"]

    async def test_upsert_error(self, publisher, route53_provider):
        """The upsert error names the hosted zone and the domain."""
        route53_provider.script("list_hosted_zones", factory.hosted_zones("hostedZoneId"))
        route53_provider.script("upsert_address_record", error=RemoteCallException("some error"))

        with pytest.raises(RemoteCallFailedException) as exc_info:
            await publisher.publish_async("domain", "ip")

        assert str(exc_info.value) == (
            "error changing the resource set in Route53 hosted zone 'hostedZoneId' with domain 'domain': some error"
        )

    async def test_ok(self, publisher, route53_provider):
        """One A record upsert with TTL 300 carrying the resolved address."""
        route53_provider.script("list_hosted_zones", factory.hosted_zones("hostedZoneId"))
        route53_provider.script("upsert_address_record", factory.change(ChangeStatus.PENDING))

        result = await publisher.publish_async("domain", "ip")

        assert result.hosted_zone_id == "hostedZoneId"
        assert result.change_info.status == ChangeStatus.PENDING
        upserts = route53_provider.calls_to("upsert_address_record")
        assert len(upserts) == 1
        assert upserts[0].arguments == {
            "hosted_zone_id": "hostedZoneId",
            "name": "domain",
            "address": "ip",
            "ttl": 300,
        }
        assert RECORD_TTL_SECONDS == 300

    @pytest.mark.parametrize("zone_ids", [("z1",), ("z1", "z2"), ("z1", "z2", "z3", "z4")])
    async def test_first_zone_is_always_targeted(self, publisher, route53_provider, zone_ids):
        route53_provider.script("list_hosted_zones", factory.hosted_zones(*zone_ids))
        route53_provider.script("upsert_address_record", factory.change())

        result = await publisher.publish_async("app.example.com", "1.2.3.4")

        assert result.hosted_zone_id == "z1"
        assert route53_provider.calls_to("upsert_address_record")[0].arguments["hosted_zone_id"] == "z1"

    async def test_repeated_publish_upserts_again(self, publisher, route53_provider):
        """No diffing: publishing the same address twice submits two changes."""
        for _ in range(2):
            route53_provider.script("list_hosted_zones", factory.hosted_zones("z1"))
            route53_provider.script("upsert_address_record", factory.change(ChangeStatus.INSYNC))

        await publisher.publish_async("app.example.com", "1.2.3.4")
        await publisher.publish_async("app.example.com", "1.2.3.4")

        assert len(route53_provider.calls_to("upsert_address_record")) == 2
        route53_provider.assert_all_consumed()
