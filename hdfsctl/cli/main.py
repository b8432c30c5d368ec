"""Main CLI entry point for hdfsctl."""

from __future__ import annotations

import click

from hdfsctl import __version__
from hdfsctl.cli.config_cmd import config
from hdfsctl.cli.upload import upload


@click.group()
@click.version_option(version=__version__, prog_name="hdfsctl")
def cli() -> None:
    """hdfsctl - Upload local files into HDFS as an impersonated user.

    Get started:

      hdfsctl config init                       # Create config file

      hdfsctl upload ./data.csv /landing/data.csv

    Use --help on any command for more information.
    """
    pass


cli.add_command(config)
cli.add_command(upload)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
