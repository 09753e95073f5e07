from .ecs_task_dto import TaskAttachment, TaskAttachmentDetail, TaskDescriptor
from .network_interface_dto import NetworkInterfaceDescriptor
from .route53_dto import ChangeInfo, HostedZone
from .task_metadata_dto import TaskMetadata

__all__ = [
    "TaskAttachment",
    "TaskAttachmentDetail",
    "TaskDescriptor",
    "NetworkInterfaceDescriptor",
    "ChangeInfo",
    "HostedZone",
    "TaskMetadata",
]
