"""selectorkit CLI entry point: Click group with subcommands."""

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Log each build step")
def cli(verbose: bool) -> None:
    """selectorkit - build canonical CSS selector strings."""
    configure_logging(SelectorkitConfig(log_level="DEBUG" if verbose else "WARNING"))


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.kinds import kinds  # noqa: E402

cli.add_command(build)
cli.add_command(kinds)
