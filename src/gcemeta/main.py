import argparse
import logging
import sys
from importlib.metadata import version

from rich.console import Console
from rich.table import Table

from .clients import MetadataClient
from .core import METADATA_URL
from .exceptions import MetadataError, PreconditionError
from .logger import setup_logger
from .schemas.instance import Instance
from .schemas.metadata import Metadata
from .schemas.project import Project

FIELDS = [
    "name",
    "zone",
    "short-zone",
    "hostname",
    "project-id",
    "numeric-project-id",
    "instance-id",
    "instance-url",
]


def _instance(meta: Metadata) -> Instance:
    if meta.instance is None:
        raise PreconditionError("Metadata has no instance record")
    return meta.instance


def _project(meta: Metadata) -> Project:
    if meta.project is None:
        raise PreconditionError("Metadata has no project record")
    return meta.project


def field_value(meta: Metadata, field: str) -> str:
    """Resolves one --field choice to its string value."""
    if field == "name":
        return _instance(meta).name
    if field == "zone":
        return _instance(meta).zone
    if field == "short-zone":
        return _instance(meta).short_zone
    if field == "hostname":
        return _instance(meta).hostname
    if field == "project-id":
        return _project(meta).project_id
    if field == "numeric-project-id":
        return str(_project(meta).numeric_project_id)
    if field == "instance-id":
        return str(_instance(meta).id)
    if field == "instance-url":
        return meta.instance_url()
    raise ValueError(f"Unknown field: {field}")


def build_summary_table(meta: Metadata) -> Table:
    table = Table(title="GCE Instance Metadata", show_header=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")

    inst = meta.instance
    if inst is not None:
        table.add_row("Instance", inst.name)
        table.add_row("Instance ID", str(inst.id))
        table.add_row("Hostname", inst.hostname)
        table.add_row("Zone", inst.short_zone)
        table.add_row("Machine Type", inst.machine_type.split("/")[-1])
        for i, nic in enumerate(inst.network_interfaces):
            table.add_row(f"nic{i} Internal IP", nic.ip)
            for ac in nic.access_configs:
                if ac.external_ip:
                    table.add_row(f"nic{i} External IP", ac.external_ip)
        if inst.tags:
            table.add_row("Tags", ", ".join(inst.tags))

    proj = meta.project
    if proj is not None:
        table.add_row("Project", proj.project_id)
        table.add_row("Project Number", str(proj.numeric_project_id))

    try:
        table.add_row("Instance URL", meta.instance_url())
    except PreconditionError as e:
        table.add_row("Instance URL", f"[yellow]{e}[/yellow]")

    return table


def main() -> None:
    parser = argparse.ArgumentParser(
        description="gcemeta: GCE Metadata Server Client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summary of the current VM
  gcemeta

  # Full recursive metadata tree as JSON
  gcemeta --json

  # A single value, handy in shell scripts
  gcemeta --field instance-url

  # Query a local stub server instead of the real metadata server
  gcemeta --endpoint-url http://127.0.0.1:8080/computeMetadata/v1/?recursive=true
""",
    )
    try:
        ver = version("gcemeta")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"gcemeta v{ver}")

    parser.add_argument(
        "--endpoint-url",
        default=METADATA_URL,
        help=f"Metadata endpoint (default: {METADATA_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: none)",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument("--json", action="store_true", help="Output metadata as JSON")
    group.add_argument("--field", choices=FIELDS, help="Print a single value")

    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging on stderr"
    )

    args = parser.parse_args()

    logger = setup_logger(level=logging.DEBUG if args.verbose else logging.ERROR)

    out_console = Console()

    client = MetadataClient(endpoint_url=args.endpoint_url, timeout=args.timeout)
    try:
        meta = client.get()

        if args.json:
            # Plain print: rich markup must not touch user-set attribute values
            print(meta.model_dump_json(by_alias=True, indent=2))
        elif args.field:
            print(field_value(meta, args.field))
        else:
            out_console.print(build_summary_table(meta))
    except MetadataError as e:
        logger.error(f"Metadata lookup failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[bold red]Operation cancelled by user.[/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    main()
