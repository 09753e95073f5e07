"""Scripted in-memory providers.

Each stub records every call it receives and answers from a per-operation FIFO
of scripted results or errors. A call with nothing scripted fails loudly with
UnscriptedCallError instead of returning a default.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import Any

import httpx

from integration.models import (
    ChangeInfo,
    HostedZone,
    NetworkInterfaceDescriptor,
    TaskDescriptor,
)
from integration.providers.interfaces import (
    DnsZoneProvider,
    EcsTaskProvider,
    MetadataEndpointClient,
    NetworkInterfaceProvider,
)


class UnscriptedCallError(AssertionError):
    """Raised when a stub receives a call nobody scripted."""
    pass


@dataclass
class RecordedCall:
    operation: str

    arguments: dict[str, Any] = field(default_factory=dict)


class StubProviderBase:
    def __init__(self) -> None:
        self.calls: list[RecordedCall] = []
        self._scripts: dict[str, deque[tuple[Any, BaseException | None]]] = defaultdict(deque)

    def script(self, operation: str, result: Any = None, error: BaseException | None = None) -> "StubProviderBase":
        """Queue the answer for the next call to ``operation``.

        Args:
            operation: Method name, e.g. "describe_tasks"
            result: Value to return
            error: Exception to raise instead of returning

        Returns:
            The stub itself so scripts can be chained
        """
        self._scripts[operation].append((result, error))
        return self

    def operations(self) -> list[str]:
        """Names of the operations called so far, in call order."""
        return [call.operation for call in self.calls]

    def calls_to(self, operation: str) -> list[RecordedCall]:
        return [call for call in self.calls if call.operation == operation]

    def assert_all_consumed(self) -> None:
        pending = {op: len(queue) for op, queue in self._scripts.items() if queue}
        if pending:
            raise AssertionError(f"Scripted calls were never made: {pending}")

    def _invoke(self, operation: str, **arguments: Any) -> Any:
        self.calls.append(RecordedCall(operation=operation, arguments=arguments))
        queue = self._scripts.get(operation)
        if not queue:
            raise UnscriptedCallError(
                f"{type(self).__name__}.{operation} called with {arguments} but nothing was scripted"
            )
        result, error = queue.popleft()
        if error is not None:
            raise error
        return result


class StubEcsTaskProvider(StubProviderBase, EcsTaskProvider):
    async def list_task_arns(self, cluster: str) -> list[str]:
        return self._invoke("list_task_arns", cluster=cluster)

    async def describe_tasks(self, cluster: str, task_arns: list[str]) -> list[TaskDescriptor]:
        return self._invoke("describe_tasks", cluster=cluster, task_arns=list(task_arns))


class StubNetworkInterfaceProvider(StubProviderBase, NetworkInterfaceProvider):
    async def describe_network_interfaces(
        self, network_interface_ids: list[str]
    ) -> list[NetworkInterfaceDescriptor]:
        return self._invoke(
            "describe_network_interfaces", network_interface_ids=list(network_interface_ids)
        )


class StubDnsZoneProvider(StubProviderBase, DnsZoneProvider):
    async def list_hosted_zones(self) -> list[HostedZone]:
        return self._invoke("list_hosted_zones")

    async def upsert_address_record(
        self, hosted_zone_id: str, name: str, address: str, ttl: int
    ) -> ChangeInfo:
        return self._invoke(
            "upsert_address_record",
            hosted_zone_id=hosted_zone_id,
            name=name,
            address=address,
            ttl=ttl,
        )


class StubMetadataEndpointClient(StubProviderBase, MetadataEndpointClient):
    async def get(self, url: str) -> httpx.Response:
        return self._invoke("get", url=url)
