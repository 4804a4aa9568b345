from pydantic import Field

from .base import BigInt, MetadataModel, NullableStr


class Project(MetadataModel):
    attributes: dict[str, NullableStr] = Field(default_factory=dict)
    project_id: str = Field(default="", description="Human-readable id, e.g. my-project")
    numeric_project_id: BigInt = 0
