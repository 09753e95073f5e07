from enum import Enum


class DiscoveryMode(str, Enum):
    """How the running task finds its own ARN."""
    METADATA = "metadata"  # Read TaskARN from the ECS task metadata endpoint
    CLUSTER_LISTING = "cluster_listing"  # First task returned by ListTasks on the cluster


class RuntimeMode(str, Enum):
    """Which provider implementations get wired at startup."""
    LIVE = "live"  # boto3 / httpx against the real endpoints
    STUB = "stub"  # In-memory scripted providers


class ChangeStatus(str, Enum):
    """Route53 change batch status."""
    PENDING = "PENDING"
    INSYNC = "INSYNC"
