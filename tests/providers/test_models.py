"""Tests for provider response models."""

import pytest
from pydantic import ValidationError

from domain.enums import ChangeStatus
from integration.models import (
    ChangeInfo,
    HostedZone,
    NetworkInterfaceDescriptor,
    TaskDescriptor,
    TaskMetadata,
)


def test_task_descriptor_from_api_response_without_attachments():
    task = TaskDescriptor.from_api_response({"taskArn": "t1", "lastStatus": "PROVISIONING"})

    assert task.task_arn == "t1"
    assert task.attachments == []
    assert task.first_detail_value("networkInterfaceId") is None


def test_first_detail_value_stops_at_first_match_without_value():
    task = TaskDescriptor.from_api_response(
        {
            "attachments": [
                {"details": [{"name": "networkInterfaceId"}]},
                {"details": [{"name": "networkInterfaceId", "value": "eni-2"}]},
            ]
        }
    )

    assert task.first_detail_value("networkInterfaceId") is None


def test_network_interface_null_association():
    eni = NetworkInterfaceDescriptor.from_api_response({"NetworkInterfaceId": "eni-1", "Association": None})

    assert eni.public_ip is None


def test_hosted_zone_and_change_info():
    zone = HostedZone.from_api_response({"Id": "/hostedzone/Z1", "Name": "example.com."})
    change = ChangeInfo.from_api_response({"Id": "/change/C1", "Status": "INSYNC"})

    assert zone.id == "/hostedzone/Z1"
    assert zone.private_zone is False
    assert change.status == ChangeStatus.INSYNC


def test_task_metadata_reads_task_arn_and_ignores_the_rest():
    metadata = TaskMetadata.model_validate({"TaskARN": "arn:aws:ecs:us-east-1:1:task/c/abc", "Containers": []})

    assert metadata.task_arn == "arn:aws:ecs:us-east-1:1:task/c/abc"


def test_task_metadata_requires_task_arn():
    with pytest.raises(ValidationError):
        TaskMetadata.model_validate({"Cluster": "c"})
