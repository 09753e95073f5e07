import datetime
from dataclasses import dataclass

from domain.enums import ChangeStatus


@dataclass
class HostedZone:
    """A Route53 hosted zone as returned by route53:ListHostedZones."""

    id: str

    name: str | None = None

    private_zone: bool = False

    @classmethod
    def from_api_response(cls, data: dict) -> "HostedZone":
        return cls(
            id=data["Id"],
            name=data.get("Name"),
            private_zone=data.get("Config", {}).get("PrivateZone", False),
        )


@dataclass
class ChangeInfo:
    """Status of a submitted Route53 change batch.

    The status is reported as returned; nothing waits for the change to reach INSYNC.
    """

    status: ChangeStatus

    id: str | None = None

    submitted_at: datetime.datetime | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "ChangeInfo":
        return cls(
            status=ChangeStatus(data["Status"]),
            id=data.get("Id"),
            submitted_at=data.get("SubmittedAt"),
        )
