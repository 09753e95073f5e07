from pydantic import BaseModel, ConfigDict, Field


class TaskMetadata(BaseModel):
    """Task metadata document served at ``${ECS_CONTAINER_METADATA_URI_V4}/task``.

    Only the task ARN is read; every other field of the document is ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    task_arn: str = Field(alias="TaskARN", min_length=1)
    """The ARN of the task the container belongs to."""
