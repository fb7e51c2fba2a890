# SPDX-License-Identifier: Apache-2.0

"""A simple file management CLI tool."""

import logging
import os

import click

from fman import copy_file_force, copy_file_safe
from fman.exceptions import FmanError
from fman.version import VERSION

L = logging.getLogger(__name__)


def _logging_level(verbose: int) -> int:
    # The DEBUG env var overrides the verbosity flags.
    if os.getenv("DEBUG", "False").lower() == "true":
        return logging.DEBUG
    return (logging.WARNING, logging.INFO, logging.DEBUG)[min(verbose, 2)]


@click.group("fman", help=__doc__)
@click.version_option(version=VERSION)
@click.option("-v", "--verbose", count=True, default=0, help="-v for INFO, -vv for DEBUG")
def main(verbose):
    """A simple file management CLI tool."""
    existing_handlers = logging.getLogger().handlers

    if existing_handlers:
        logging.warning(
            "A basicConfig has been set at import time. This is an antipattern and needs to be "
            "addressed by the respective package as it overrides this cli's configuration."
        )

    logging.basicConfig(
        level=_logging_level(verbose),
        format="%(asctime)s %(levelname)-8s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@main.command()
@click.argument("source")
@click.argument("destination")
@click.option("-f", "--force", is_flag=True, default=False, help="Overwrite the destination.")
def copy(source, destination, force):
    """Copy SOURCE to DESTINATION, a directory or a file path."""
    try:
        if force:
            copy_file_force(source, destination)
        else:
            copy_file_safe(source, destination)
    except FmanError as e:
        raise click.ClickException(str(e)) from e


# TODO: move and delete exit with success although nothing is done. Return a non-zero status
# once the commands are implemented or removed from the interface.
@main.command()
@click.argument("source")
@click.argument("destination")
def move(source, destination):
    """Move SOURCE to DESTINATION (not implemented)."""
    L.warning("Move of %s to %s requested but not implemented.", source, destination)
    click.echo("Move not implemented.", err=True)


@main.command()
@click.argument("target")
@click.option("-f", "--force", is_flag=True, default=False, help="Do not prompt.")
def delete(target, force):
    """Delete TARGET (not implemented)."""
    L.warning("Delete of %s (force=%s) requested but not implemented.", target, force)
    click.echo("Delete not implemented.", err=True)


if __name__ == "__main__":
    main()  # pylint: disable=no-value-for-parameter
