"""Task address resolution.

Finds the ARN of the running task, the ENI attached to it, and the public IP
associated with that ENI. Every step takes the first element of what the
provider returns; an empty answer is an error, never an index fault.
"""

import logging

from opentelemetry import trace

from application.exceptions import (
    MetadataDecodeException,
    NoPublicAssociationException,
    RemoteCallFailedException,
    ResourceNotFoundException,
)
from integration.exceptions import IntegrationException
from integration.models import TaskMetadata
from integration.providers.interfaces import (
    EcsTaskProvider,
    MetadataEndpointClient,
    NetworkInterfaceProvider,
)

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

NETWORK_INTERFACE_ID_DETAIL = "networkInterfaceId"


class TaskAddressResolver:
    """Resolves a task to the public IP of its network interface."""

    def __init__(
        self,
        ecs_provider: EcsTaskProvider,
        network_interface_provider: NetworkInterfaceProvider,
        metadata_client: MetadataEndpointClient,
    ):
        self.ecs_provider = ecs_provider
        self.network_interface_provider = network_interface_provider
        self.metadata_client = metadata_client

    async def get_current_task_arn_async(self, metadata_uri: str) -> str:
        """Read the ARN of the task this process runs in from the task metadata endpoint.

        Args:
            metadata_uri: Value of ECS_CONTAINER_METADATA_URI_V4

        Returns:
            The task ARN

        Raises:
            RemoteCallFailedException: If the metadata request fails
            MetadataDecodeException: If the document is not JSON or has no TaskARN
        """
        url = metadata_uri.rstrip("/") + "/task"

        with tracer.start_as_current_span("get_current_task_arn") as span:
            span.set_attribute("ecs.metadata_url", url)
            try:
                response = await self.metadata_client.get(url)
            except IntegrationException as e:
                raise RemoteCallFailedException(f"error requesting metadata: {e}") from e

            try:
                metadata = TaskMetadata.model_validate(response.json())
            except ValueError as e:
                raise MetadataDecodeException(f"error decoding the metadata request response: {e}") from e

            span.set_attribute("ecs.task_arn", metadata.task_arn)

        log.info(f"Task ARN: {metadata.task_arn}")
        return metadata.task_arn

    async def get_first_cluster_task_arn_async(self, cluster_name: str) -> str:
        """Take the first task ECS lists for the cluster.

        Raises:
            RemoteCallFailedException: If ecs:ListTasks fails
            ResourceNotFoundException: If the cluster has no tasks
        """
        with tracer.start_as_current_span("get_first_cluster_task_arn") as span:
            span.set_attribute("ecs.cluster", cluster_name)
            try:
                task_arns = await self.ecs_provider.list_task_arns(cluster_name)
            except IntegrationException as e:
                raise RemoteCallFailedException(f"error listing tasks in cluster '{cluster_name}': {e}") from e

            if not task_arns:
                raise ResourceNotFoundException(f"no tasks found in cluster '{cluster_name}'")

            task_arn = task_arns[0]
            span.set_attribute("ecs.task_arn", task_arn)

        log.info(f"Task ARN: {task_arn}")
        return task_arn

    async def get_task_eni_async(self, cluster_name: str, task_arn: str) -> str:
        """Find the id of the ENI attached to a task.

        The first ``networkInterfaceId`` detail wins, scanning attachments in order and
        then each attachment's details in order.

        Raises:
            RemoteCallFailedException: If ecs:DescribeTasks fails
            ResourceNotFoundException: If the task is unknown or has no ENI attachment
        """
        with tracer.start_as_current_span("get_task_eni") as span:
            span.set_attribute("ecs.cluster", cluster_name)
            span.set_attribute("ecs.task_arn", task_arn)
            try:
                tasks = await self.ecs_provider.describe_tasks(cluster_name, [task_arn])
            except IntegrationException as e:
                raise RemoteCallFailedException(f"error describing task with arn '{task_arn}': {e}") from e

            if not tasks:
                raise ResourceNotFoundException(f"task with arn '{task_arn}' not found in cluster '{cluster_name}'")

            eni = tasks[0].first_detail_value(NETWORK_INTERFACE_ID_DETAIL)
            if not eni:
                raise ResourceNotFoundException("eni not found")

            span.set_attribute("ec2.network_interface_id", eni)

        log.info(f"The eni of the first task is '{eni}'")
        return eni

    async def get_public_ip_async(self, network_interface_id: str) -> str:
        """Read the public IP associated with an ENI.

        Raises:
            RemoteCallFailedException: If ec2:DescribeNetworkInterfaces fails
            ResourceNotFoundException: If the interface is unknown
            NoPublicAssociationException: If the interface has no public IP
        """
        with tracer.start_as_current_span("get_public_ip") as span:
            span.set_attribute("ec2.network_interface_id", network_interface_id)
            try:
                interfaces = await self.network_interface_provider.describe_network_interfaces([network_interface_id])
            except IntegrationException as e:
                raise RemoteCallFailedException(
                    f"error describing network interface with id '{network_interface_id}': {e}"
                ) from e

            if not interfaces:
                raise ResourceNotFoundException(f"network interface with id '{network_interface_id}' not found")

            public_ip = interfaces[0].public_ip
            if not public_ip:
                raise NoPublicAssociationException(
                    f"network interface with id '{network_interface_id}' has no public association"
                )

            span.set_attribute("ec2.public_ip", public_ip)

        log.info(f"Public ip: {public_ip}")
        return public_ip

    async def resolve_public_ip_async(self, cluster_name: str, task_arn: str) -> tuple[str, str]:
        """Resolve a task to its ENI and that ENI's public IP.

        Returns:
            (network_interface_id, public_ip)
        """
        eni = await self.get_task_eni_async(cluster_name, task_arn)
        public_ip = await self.get_public_ip_async(eni)
        return eni, public_ip
