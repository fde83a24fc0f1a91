"""
ksuid CLI

Generates identifiers, or inspects existing ones, in the same spirit as the
reference `ksuid` tool from segmentio.

Usage:
    ksuid                         # one new id
    ksuid -n 5                    # five new ids
    ksuid -f inspect 0ujtsYcgvSTl8PAuAdqWYSMnLOv
    ksuid -f time --tz UTC 0ujtsYcgvSTl8PAuAdqWYSMnLOv
    ksuid -f template -t '{{.Time}} {{.Payload}}' <id> <id>
"""

from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ksuid_toolkit.config import load_settings
from ksuid_toolkit.formatting import OutputFormat, render
from ksuid_toolkit.kernel.errors import KsuidError
from ksuid_toolkit.kernel.logging import (
    configure_logging,
    generate_correlation_id,
    get_logger,
    set_correlation_id,
)
from ksuid_toolkit.ksuid import Ksuid
from ksuid_toolkit.service import KsuidService

logger = get_logger(__name__)

app = typer.Typer(
    name="ksuid",
    help="Generate and inspect K-Sortable Unique Identifiers",
    add_completion=False,
)


@app.command()
def ksuid(
    ksuids: Annotated[
        Optional[list[str]],
        typer.Argument(help="KSUIDs to parse; when omitted, new ones are generated"),
    ] = None,
    count: Annotated[
        Optional[int],
        typer.Option(
            "-n",
            "--count",
            min=0,
            help="Number of KSUIDs to generate when called with no other arguments",
        ),
    ] = None,
    fmt: Annotated[
        Optional[OutputFormat],
        typer.Option("-f", "--format", help="Output format"),
    ] = None,
    template: Annotated[
        str,
        typer.Option("-t", "--template", help="The Go template used to format the output"),
    ] = "",
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Turn on verbose mode"),
    ] = False,
    tz: Annotated[
        Optional[str],
        typer.Option("--tz", help="IANA timezone for time output (default: local zone)"),
    ] = None,
) -> None:
    """Generate KSUIDs, or print existing ones in the chosen format"""
    try:
        settings = load_settings()
    except ValidationError as exc:
        typer.echo(f"Error: invalid settings: {exc}", err=True)
        raise typer.Exit(1)

    configure_logging(json_output=settings.json_logs, log_level=settings.log_level)
    # One correlation id per invocation
    set_correlation_id(generate_correlation_id())

    zone_name = tz or settings.timezone
    zone = None
    if zone_name:
        try:
            zone = ZoneInfo(zone_name)
        except (ZoneInfoNotFoundError, ValueError):
            typer.echo(f"Error: unknown timezone: {zone_name}", err=True)
            raise typer.Exit(1)

    service = KsuidService(settings)

    results: list[Ksuid] = []
    if not ksuids:
        results.extend(service.generate(count))
    for arg in ksuids or []:
        try:
            results.append(service.parse(arg))
        except KsuidError:
            typer.echo(
                f'Error when parsing "{arg}": Valid encoded KSUIDs are 27 characters',
                err=True,
            )
            raise typer.Exit(1)

    output_format = fmt or settings.default_format
    logger.debug("printing", count=len(results), format=output_format.value)
    for item in results:
        line = render(item, output_format, template=template, tz=zone)
        if verbose:
            line = f"{item}: {line}"
        typer.echo(line)


def main() -> None:
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
