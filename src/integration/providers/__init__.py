"""Remote provider ports and their implementations."""

from integration.providers.aws_providers import (
    AwsDnsZoneProvider,
    AwsEcsTaskProvider,
    AwsNetworkInterfaceProvider,
)
from integration.providers.factory import ProviderFactory, Providers
from integration.providers.interfaces import (
    DnsZoneProvider,
    EcsTaskProvider,
    MetadataEndpointClient,
    NetworkInterfaceProvider,
)
from integration.providers.metadata_endpoint_client import HttpMetadataEndpointClient
from integration.providers.stub_providers import (
    RecordedCall,
    StubDnsZoneProvider,
    StubEcsTaskProvider,
    StubMetadataEndpointClient,
    StubNetworkInterfaceProvider,
    UnscriptedCallError,
)

__all__ = [
    "AwsDnsZoneProvider",
    "AwsEcsTaskProvider",
    "AwsNetworkInterfaceProvider",
    "DnsZoneProvider",
    "EcsTaskProvider",
    "HttpMetadataEndpointClient",
    "MetadataEndpointClient",
    "NetworkInterfaceProvider",
    "ProviderFactory",
    "Providers",
    "RecordedCall",
    "StubDnsZoneProvider",
    "StubEcsTaskProvider",
    "StubMetadataEndpointClient",
    "StubNetworkInterfaceProvider",
    "UnscriptedCallError",
]
