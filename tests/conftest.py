"""Shared fixtures: scripted providers and registration settings."""

import pytest

from application.settings import Settings
from domain.enums import DiscoveryMode, RuntimeMode
from integration.providers import (
    Providers,
    StubDnsZoneProvider,
    StubEcsTaskProvider,
    StubMetadataEndpointClient,
    StubNetworkInterfaceProvider,
)

REGISTRAR_ENV_VARS = [
    "CLUSTER_NAME",
    "DOMAIN",
    "ECS_CONTAINER_METADATA_URI_V4",
    "DISCOVERY_MODE",
    "RUNTIME_MODE",
    "REGISTRATION_TIMEOUT",
    "LOG_LEVEL",
    "LOG_FILE",
    "AWS_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove registrar variables inherited from the developer's shell."""
    for name in REGISTRAR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env):
    """Settings for a metadata-discovery run against stub providers."""
    return Settings(
        cluster_name="cluster",
        domain="app.example.com",
        ecs_container_metadata_uri_v4="http://endpointUrl",
        discovery_mode=DiscoveryMode.METADATA,
        runtime_mode=RuntimeMode.STUB,
    )


@pytest.fixture
def ecs_provider():
    return StubEcsTaskProvider()


@pytest.fixture
def ec2_provider():
    return StubNetworkInterfaceProvider()


@pytest.fixture
def route53_provider():
    return StubDnsZoneProvider()


@pytest.fixture
def metadata_client():
    return StubMetadataEndpointClient()


@pytest.fixture
def providers(ecs_provider, ec2_provider, route53_provider, metadata_client):
    return Providers(
        ecs=ecs_provider,
        ec2=ec2_provider,
        route53=route53_provider,
        metadata=metadata_client,
    )
