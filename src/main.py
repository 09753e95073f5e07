"""Task DNS Registrar - Main Entry Point.

Registers the public IP of the running ECS task as a Route53 A record, then exits.
"""

import asyncio
import logging
import sys

from application.exceptions import RegistrationException, RegistrationTimeoutException
from application.services import RegistrationResult, TaskDnsRegistrationService
from application.settings import Settings, configure_logging
from integration.providers import ProviderFactory

log = logging.getLogger(__name__)


async def run_async(settings: Settings) -> RegistrationResult:
    """Wire the providers and run one registration within the configured deadline."""
    providers = ProviderFactory(settings).create_providers()
    service = TaskDnsRegistrationService(providers, settings)
    try:
        return await asyncio.wait_for(service.register_async(), timeout=settings.registration_timeout)
    except asyncio.TimeoutError as e:
        raise RegistrationTimeoutException(
            f"error registering task address: timed out after {settings.registration_timeout} seconds"
        ) from e


def main() -> int:
    """Main entry point.

    Returns:
        Process exit status: 0 once the change is submitted, 1 on any registration error
    """
    try:
        settings = Settings.load()
    except RegistrationException as e:
        configure_logging()
        log.error(str(e))
        return 1

    configure_logging(settings.log_level)
    log.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        settings.validate_for_registration()
        log.info(
            f"Registering task of cluster '{settings.cluster_name}' as '{settings.domain}' "
            f"(discovery: {settings.discovery_mode.value}, providers: {settings.runtime_mode.value})"
        )
        aws_call_timeout = settings.aws_connect_timeout + settings.aws_read_timeout
        if settings.registration_timeout < aws_call_timeout:
            # A timed-out run still waits for the AWS call running in its worker thread
            log.warning(
                f"REGISTRATION_TIMEOUT ({settings.registration_timeout}s) is shorter than one AWS call "
                f"({aws_call_timeout}s); exit may be delayed until the call in flight returns"
            )
        result = asyncio.run(run_async(settings))
    except RegistrationException as e:
        log.error(str(e))
        return 1

    log.info(f"Change Route53 recordset status: {result.change_info.status.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
