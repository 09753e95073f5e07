from .dns_record_publisher import DnsRecordPublisher, PublishedRecord
from .task_address_resolver import TaskAddressResolver
from .task_dns_registration_service import (
    RegistrationResult,
    TaskDnsRegistrationService,
)

__all__ = [
    "DnsRecordPublisher",
    "PublishedRecord",
    "TaskAddressResolver",
    "RegistrationResult",
    "TaskDnsRegistrationService",
]
