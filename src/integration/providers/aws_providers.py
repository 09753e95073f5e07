"""AWS provider implementations.

Thin async wrappers over boto3 clients for ECS, EC2 and Route53. The blocking
boto3 calls run in a worker thread so that a caller-imposed deadline can cancel
the awaiting coroutine.
"""

import asyncio
import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from integration.exceptions import RemoteCallException
from integration.models import (
    ChangeInfo,
    HostedZone,
    NetworkInterfaceDescriptor,
    TaskDescriptor,
)
from integration.providers.interfaces import (
    DnsZoneProvider,
    EcsTaskProvider,
    NetworkInterfaceProvider,
)

log = logging.getLogger(__name__)


def build_upsert_change_batch(name: str, address: str, ttl: int) -> dict[str, Any]:
    """Build a Route53 change batch holding a single A record UPSERT."""
    return {
        "Changes": [
            {
                "Action": "UPSERT",
                "ResourceRecordSet": {
                    "Name": name,
                    "Type": "A",
                    "TTL": ttl,
                    "ResourceRecords": [{"Value": address}],
                },
            }
        ]
    }


class AwsProviderBase:
    """Shared call/translate logic for boto3 backed providers."""

    def __init__(self, client: Any):
        self._client = client

    def _parse_aws_error(self, error: ClientError, operation: str) -> RemoteCallException:
        """Translate a botocore ClientError into a RemoteCallException.

        Args:
            error: The boto3 ClientError
            operation: The boto3 operation name that failed

        Returns:
            RemoteCallException carrying the AWS error message
        """
        error_code = error.response.get("Error", {}).get("Code", "")
        error_message = error.response.get("Error", {}).get("Message", str(error))
        return RemoteCallException(error_message, operation=operation, error_code=error_code)

    async def _call_async(self, operation: str, **kwargs: Any) -> dict[str, Any]:
        method = getattr(self._client, operation)
        try:
            return await asyncio.to_thread(method, **kwargs)
        except ClientError as e:
            log.debug(f"AWS call {operation} failed: {e}")
            raise self._parse_aws_error(e, operation) from e
        except BotoCoreError as e:
            log.debug(f"AWS call {operation} failed: {e}")
            raise RemoteCallException(str(e), operation=operation) from e


class AwsEcsTaskProvider(AwsProviderBase, EcsTaskProvider):
    """ECS task inspection through a boto3 ``ecs`` client."""

    async def list_task_arns(self, cluster: str) -> list[str]:
        # https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/ecs/client/list_tasks.html
        response = await self._call_async("list_tasks", cluster=cluster)
        return list(response.get("taskArns", []))

    async def describe_tasks(self, cluster: str, task_arns: list[str]) -> list[TaskDescriptor]:
        # https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/ecs/client/describe_tasks.html
        response = await self._call_async("describe_tasks", cluster=cluster, tasks=task_arns)
        for failure in response.get("failures", []):
            log.warning(f"ECS could not describe task {failure.get('arn')}: {failure.get('reason')}")
        return [TaskDescriptor.from_api_response(task) for task in response.get("tasks", [])]


class AwsNetworkInterfaceProvider(AwsProviderBase, NetworkInterfaceProvider):
    """ENI inspection through a boto3 ``ec2`` client."""

    async def describe_network_interfaces(
        self, network_interface_ids: list[str]
    ) -> list[NetworkInterfaceDescriptor]:
        # https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/ec2/client/describe_network_interfaces.html
        response = await self._call_async(
            "describe_network_interfaces", NetworkInterfaceIds=network_interface_ids
        )
        return [
            NetworkInterfaceDescriptor.from_api_response(eni)
            for eni in response.get("NetworkInterfaces", [])
        ]


class AwsDnsZoneProvider(AwsProviderBase, DnsZoneProvider):
    """Hosted zone management through a boto3 ``route53`` client."""

    async def list_hosted_zones(self) -> list[HostedZone]:
        # First page only; zones are taken in the order Route53 returns them.
        response = await self._call_async("list_hosted_zones")
        return [HostedZone.from_api_response(zone) for zone in response.get("HostedZones", [])]

    async def upsert_address_record(
        self, hosted_zone_id: str, name: str, address: str, ttl: int
    ) -> ChangeInfo:
        # https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/route53/client/change_resource_record_sets.html
        response = await self._call_async(
            "change_resource_record_sets",
            HostedZoneId=hosted_zone_id,
            ChangeBatch=build_upsert_change_batch(name, address, ttl),
        )
        return ChangeInfo.from_api_response(response["ChangeInfo"])
