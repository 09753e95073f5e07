from dataclasses import dataclass


@dataclass
class NetworkInterfaceDescriptor:
    """Network interface details from ec2:DescribeNetworkInterfaces."""

    network_interface_id: str | None = None

    public_ip: str | None = None  # None when the interface has no public association

    private_ip: str | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "NetworkInterfaceDescriptor":
        association = data.get("Association") or {}
        return cls(
            network_interface_id=data.get("NetworkInterfaceId"),
            public_ip=association.get("PublicIp"),
            private_ip=data.get("PrivateIpAddress"),
        )
