"""Upload command for hdfsctl."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from hdfsctl.cli.common import Context, ExitCode, global_options, handle_errors
from hdfsctl.core.output import print_error, print_success


@click.command("upload")
@click.argument("source", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("destination")
@click.option("--url", default=None, help="Filesystem endpoint (overrides profile)")
@click.option("--user", "-u", default=None, help="User to act as (overrides profile)")
@global_options
@handle_errors
def upload(
    ctx: Context,
    source: Path,
    destination: str,
    url: Optional[str],
    user: Optional[str],
) -> None:
    """Upload SOURCE to DESTINATION on HDFS.

    Example:
        hdfsctl upload ./report.csv /landing/report.csv --user etl
    """
    ctx.url = url
    ctx.user = user

    uploader = ctx.get_uploader()
    if not uploader.upload(source, destination):
        print_error(f"Upload of {source} to {destination} failed")
        sys.exit(ExitCode.GENERAL_ERROR)

    if not ctx.quiet:
        print_success(f"Uploaded {source} to {destination}")
