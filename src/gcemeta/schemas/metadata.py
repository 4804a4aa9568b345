from ..core import COMPUTE_API_BASE
from ..exceptions import PreconditionError
from .base import MetadataModel
from .instance import Instance
from .project import Project


class Metadata(MetadataModel):
    """Full recursive metadata tree for the current host."""

    instance: Instance | None = None
    project: Project | None = None

    def instance_url(self) -> str:
        """
        Fully qualified URL of the instance for the Compute Engine API.
        Raises PreconditionError instead of building a URL with missing parts.
        """
        if self.project is None:
            raise PreconditionError("Cannot build instance URL: project metadata is missing")
        if self.instance is None:
            raise PreconditionError("Cannot build instance URL: instance metadata is missing")

        project_id = self.project.project_id
        zone = self.instance.short_zone
        name = self.instance.name

        empty = [
            label
            for label, value in (
                ("project id", project_id),
                ("zone", zone),
                ("instance name", name),
            )
            if not value
        ]
        if empty:
            raise PreconditionError(
                f"Cannot build instance URL: empty {', '.join(empty)}"
            )

        return f"{COMPUTE_API_BASE}/projects/{project_id}/zones/{zone}/instances/{name}"
