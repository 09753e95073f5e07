"""Tests for the scripted stub providers."""

import httpx
import pytest

from integration.exceptions import RemoteCallException
from integration.providers import (
    RecordedCall,
    StubDnsZoneProvider,
    StubEcsTaskProvider,
    StubMetadataEndpointClient,
    UnscriptedCallError,
)


@pytest.mark.asyncio
@pytest.mark.unit
class TestStubProviders:
    async def test_records_calls_and_returns_scripts_in_order(self):
        stub = StubEcsTaskProvider()
        stub.script("list_task_arns", ["t1"]).script("list_task_arns", ["t2"])

        first = await stub.list_task_arns("c1")
        second = await stub.list_task_arns("c2")

        assert (first, second) == (["t1"], ["t2"])
        assert stub.calls == [
            RecordedCall("list_task_arns", {"cluster": "c1"}),
            RecordedCall("list_task_arns", {"cluster": "c2"}),
        ]
        stub.assert_all_consumed()

    async def test_scripted_error_is_raised(self):
        stub = StubDnsZoneProvider()
        stub.script("list_hosted_zones", error=RemoteCallException("boom"))

        with pytest.raises(RemoteCallException, match="boom"):
            await stub.list_hosted_zones()

        assert stub.operations() == ["list_hosted_zones"]

    async def test_unscripted_call_fails(self):
        stub = StubEcsTaskProvider()

        with pytest.raises(UnscriptedCallError, match="describe_tasks"):
            await stub.describe_tasks("c", ["t1"])

        assert stub.calls_to("describe_tasks")[0].arguments == {"cluster": "c", "task_arns": ["t1"]}

    async def test_metadata_stub_returns_scripted_response(self):
        stub = StubMetadataEndpointClient()
        stub.script("get", httpx.Response(200, json={"TaskARN": "taskArn"}))

        response = await stub.get("http://endpointUrl/task")

        assert response.json()["TaskARN"] == "taskArn"


def test_assert_all_consumed_reports_leftovers():
    stub = StubDnsZoneProvider()
    stub.script("upsert_address_record", None)

    with pytest.raises(AssertionError, match="upsert_address_record"):
        stub.assert_all_consumed()
