from typing import Annotated

from pydantic import Field

from .base import BigInt, MetadataModel, NullableStr, OrEmptyRecord


class Disk(MetadataModel):
    device_name: str = ""
    index: BigInt = Field(default=0, description="Zero-based attachment index")
    mode: str = Field(default="", description="e.g., READ_WRITE, READ_ONLY")
    type: str = Field(default="", description="e.g., PERSISTENT, SCRATCH")


# null list entries decode to all-default records
DiskEntry = Annotated[Disk, OrEmptyRecord]


class AccessConfig(MetadataModel):
    external_ip: str = ""
    type: str = Field(default="", description="e.g., ONE_TO_ONE_NAT")


AccessConfigEntry = Annotated[AccessConfig, OrEmptyRecord]


class NetworkInterface(MetadataModel):
    access_configs: list[AccessConfigEntry] = Field(default_factory=list)
    forwarded_ips: list[NullableStr] = Field(default_factory=list)
    ip: str = ""
    network: str = Field(default="", description="e.g., projects/123/networks/default")


NetworkInterfaceEntry = Annotated[NetworkInterface, OrEmptyRecord]


class Scheduling(MetadataModel):
    automatic_restart: str = Field(default="", description="TRUE or FALSE")
    on_host_maintenance: str = Field(default="", description="MIGRATE or TERMINATE")


class Instance(MetadataModel):
    attributes: dict[str, NullableStr] = Field(default_factory=dict)
    description: str = ""
    disks: list[DiskEntry] = Field(default_factory=list)
    hostname: str = Field(
        default="", description="e.g., vm-1.us-central1-a.c.my-project.internal"
    )
    # Python ints are unbounded, ids above 2**63 survive decoding
    id: BigInt = 0
    image: str = ""
    machine_type: str = Field(
        default="", description="e.g., projects/123/machineTypes/n1-standard-1"
    )
    maintenance_event: str = ""
    network_interfaces: list[NetworkInterfaceEntry] = Field(
        default_factory=list
    )
    scheduling: Scheduling = Field(default_factory=Scheduling)
    tags: list[NullableStr] = Field(default_factory=list)
    zone: str = Field(default="", description="e.g., projects/123/zones/us-central1-a")

    @property
    def name(self) -> str:
        """Instance name, the leading label of the hostname."""
        return self.hostname.split(".", 1)[0]

    @property
    def short_zone(self) -> str:
        """Trailing token of the zone path (e.g. us-central1-a)."""
        return self.zone.rsplit("/", 1)[-1]
