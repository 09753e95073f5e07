"""Provider Service Provider Interfaces (SPI).

Narrow capability interfaces over the remote services the registrar talks to.
Each port exposes only the calls the registration pipeline needs.

Implementations:
- Aws*Provider / HttpMetadataEndpointClient: live boto3 and httpx clients
- Stub*Provider / StubMetadataEndpointClient: scripted in-memory doubles for tests
"""

from abc import ABC, abstractmethod

import httpx

from integration.models import (
    ChangeInfo,
    HostedZone,
    NetworkInterfaceDescriptor,
    TaskDescriptor,
)


class EcsTaskProvider(ABC):
    """Inspection of ECS tasks."""

    @abstractmethod
    async def list_task_arns(self, cluster: str) -> list[str]:
        """
        List the ARNs of the tasks running in a cluster.

        Args:
            cluster: Cluster name or ARN

        Returns:
            Task ARNs in the order returned by ECS
        """
        pass

    @abstractmethod
    async def describe_tasks(self, cluster: str, task_arns: list[str]) -> list[TaskDescriptor]:
        """
        Describe tasks by ARN.

        Args:
            cluster: Cluster name or ARN
            task_arns: ARNs of the tasks to describe

        Returns:
            One TaskDescriptor per task found (missing tasks are omitted)
        """
        pass


class NetworkInterfaceProvider(ABC):
    """Inspection of EC2 elastic network interfaces."""

    @abstractmethod
    async def describe_network_interfaces(
        self, network_interface_ids: list[str]
    ) -> list[NetworkInterfaceDescriptor]:
        """
        Describe network interfaces by id.

        Args:
            network_interface_ids: ENI ids (eni-...)

        Returns:
            One NetworkInterfaceDescriptor per interface
        """
        pass


class DnsZoneProvider(ABC):
    """Route53 hosted zone management."""

    @abstractmethod
    async def list_hosted_zones(self) -> list[HostedZone]:
        """
        List hosted zones in the order returned by Route53.
        """
        pass

    @abstractmethod
    async def upsert_address_record(
        self, hosted_zone_id: str, name: str, address: str, ttl: int
    ) -> ChangeInfo:
        """
        Create or replace a single A record.

        Args:
            hosted_zone_id: Target hosted zone
            name: Fully qualified record name
            address: IPv4 address the record points at
            ttl: Record time-to-live in seconds

        Returns:
            The change info reported by Route53 (not awaited to INSYNC)
        """
        pass


class MetadataEndpointClient(ABC):
    """Plain HTTP GET against the container metadata endpoint."""

    @abstractmethod
    async def get(self, url: str) -> httpx.Response:
        """
        Fetch a URL.

        Raises:
            RemoteCallException: If the request fails or returns a non-success status
        """
        pass
