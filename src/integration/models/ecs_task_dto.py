from dataclasses import dataclass, field


@dataclass
class TaskAttachmentDetail:
    """A single name/value pair of an ECS task attachment."""

    name: str

    value: str | None = None


@dataclass
class TaskAttachment:
    """A resource bound to an ECS task (e.g. an ElasticNetworkInterface)."""

    id: str | None = None

    type: str | None = None

    status: str | None = None

    details: list[TaskAttachmentDetail] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "TaskAttachment":
        return cls(
            id=data.get("id"),
            type=data.get("type"),
            status=data.get("status"),
            details=[
                TaskAttachmentDetail(name=detail.get("name", ""), value=detail.get("value"))
                for detail in data.get("details", [])
            ],
        )


@dataclass
class TaskDescriptor:
    """The subset of an ECS DescribeTasks entry used to locate the task's network interface."""

    task_arn: str | None = None

    last_status: str | None = None

    attachments: list[TaskAttachment] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "TaskDescriptor":
        """Parse one element of the ``tasks`` list returned by ecs:DescribeTasks.

        Args:
            data: Raw task dict from boto3

        Returns:
            TaskDescriptor instance
        """
        return cls(
            task_arn=data.get("taskArn"),
            last_status=data.get("lastStatus"),
            attachments=[TaskAttachment.from_api_response(a) for a in data.get("attachments", [])],
        )

    def first_detail_value(self, name: str) -> str | None:
        """Return the value of the first attachment detail called ``name``.

        Attachments are scanned in order, then their details in order; later matches are ignored
        even when the first match carries no value.
        """
        for attachment in self.attachments:
            for detail in attachment.details:
                if detail.name == name:
                    return detail.value
        return None
