from .clients import MetadataClient, get
from .exceptions import (
    DecodeError,
    MetadataError,
    PreconditionError,
    RequestConstructionError,
    TransportError,
)
from .schemas.instance import AccessConfig, Disk, Instance, NetworkInterface, Scheduling
from .schemas.metadata import Metadata
from .schemas.project import Project

__all__ = [
    "AccessConfig",
    "DecodeError",
    "Disk",
    "Instance",
    "Metadata",
    "MetadataClient",
    "MetadataError",
    "NetworkInterface",
    "PreconditionError",
    "Project",
    "RequestConstructionError",
    "Scheduling",
    "TransportError",
    "get",
]
