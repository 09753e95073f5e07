"""Application settings configuration."""

import logging
import os
import sys

from neuroglia.hosting.abstractions import ApplicationSettings
from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

from application.exceptions import ConfigurationException
from domain.enums import DiscoveryMode, RuntimeMode


class Settings(ApplicationSettings):
    """Registrar settings, read once from the process environment at startup."""

    # Application Configuration
    app_name: str = "Task DNS Registrar"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Registration Target
    cluster_name: str | None = None  # CLUSTER_NAME
    domain: str | None = None  # DOMAIN - record name to upsert, e.g. "app.example.com"

    # Task Discovery
    discovery_mode: DiscoveryMode = DiscoveryMode.METADATA
    ecs_container_metadata_uri_v4: str | None = None  # Injected by the ECS agent into every container

    # Provider Wiring
    runtime_mode: RuntimeMode = RuntimeMode.LIVE

    # AWS Account Credentials (optional, default credential chain otherwise)
    aws_region: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_session_token: str | None = None  # Temporary credentials (assumed roles, SSO)

    # Timeouts (seconds)
    aws_connect_timeout: int = 5
    aws_read_timeout: int = 30
    metadata_request_timeout: float = 5.0
    registration_timeout: float = 120.0  # Deadline for the whole discover/resolve/publish run

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    @classmethod
    def load(cls) -> "Settings":
        """Read settings from the environment.

        Raises:
            ConfigurationException: If a value cannot be parsed (e.g. an unknown DISCOVERY_MODE)
        """
        try:
            return cls()
        except ValidationError as e:
            raise ConfigurationException(f"invalid configuration: {e}") from e

    def missing_required_settings(self) -> list[str]:
        """Names of the environment variables a registration run needs but that are unset."""
        missing = []
        if not self.cluster_name:
            missing.append("CLUSTER_NAME")
        if not self.domain:
            missing.append("DOMAIN")
        if self.discovery_mode == DiscoveryMode.METADATA and not self.ecs_container_metadata_uri_v4:
            missing.append("ECS_CONTAINER_METADATA_URI_V4")
        return missing

    def validate_for_registration(self) -> None:
        """Fail fast before any remote call when required configuration is absent.

        Raises:
            ConfigurationException: Listing every missing variable
        """
        missing = self.missing_required_settings()
        if missing:
            raise ConfigurationException(f"missing required configuration: {', '.join(missing)}")


def configure_logging(log_level: str = "INFO") -> None:
    """Configure process-wide logging.

    Logs go to stdout, which is what the awslogs driver ships to CloudWatch. A file
    handler is added when LOG_FILE is set.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = log_level.upper()

    # Get root logger and clear any existing handlers to prevent duplicates
    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.handlers.clear()

    root_logger.setLevel(log_level)

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.getenv("LOG_FILE")
    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            # Read-only container filesystems are common; stdout logging still works
            root_logger.warning(f"Could not open log file {log_file}: {e}")

    # Set third-party loggers to WARNING to reduce noise
    third_party_loggers = [
        "boto3",
        "botocore",
        "urllib3",
        "httpx",
        "httpcore",
        "asyncio",
    ]

    for logger_name in third_party_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
