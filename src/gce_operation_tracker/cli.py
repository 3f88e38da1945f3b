"""Command-line entry point for waiting on a Compute Engine operation."""
import sys

import click

from gce_operation_tracker.CompletionResult import CompletionKind
from gce_operation_tracker.ComputeConnector import ComputeConnector
from gce_operation_tracker.configuration import DEFAULT_TIMEOUT_MILLIS
from gce_operation_tracker.exceptions import OperationTimeoutError

EXIT_FAILURE = 1
EXIT_TIMEOUT = 3


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """Track Google Compute Engine operations."""


@cli.command()
@click.argument("operation_name")
@click.option("--project", default=None, help="GCP project ID (defaults to PROJECT_ID)")
@click.option("--zone", default=None, help="Zone of a zonal operation")
@click.option("--region", default=None, help="Region of a regional operation")
@click.option("--timeout-millis", default=DEFAULT_TIMEOUT_MILLIS, type=click.IntRange(min=1), show_default=True)
def wait(operation_name, project, zone, region, timeout_millis):
    """Wait until OPERATION_NAME finishes."""
    if zone and region:
        raise click.UsageError("--zone and --region are mutually exclusive")

    try:
        connector = ComputeConnector(project=project)
    except ValueError as e:
        raise click.UsageError(str(e))

    try:
        result = connector.wait(operation_name, zone=zone, region=region, timeout_millis=timeout_millis)
    except OperationTimeoutError as e:
        click.echo(f"timeout: {e}", err=True)
        sys.exit(EXIT_TIMEOUT)

    if result.kind is CompletionKind.FAILURE:
        click.echo(f"failure: {result.message}", err=True)
        sys.exit(EXIT_FAILURE)

    click.echo(result.kind.value)


def main():
    cli()


if __name__ == "__main__":
    main()
