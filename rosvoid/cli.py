#!/usr/bin/env python3

import click

from rosvoid.commands.generate import generate_handler
from rosvoid.commands.list import list_handler
from rosvoid.commands.config import config_cmd


@click.group()
@click.version_option(package_name="rosvoid")
def cli():
    """rosvoid - Generate Void Linux templates from a ROS distribution.

    Reads a rosdistro distribution file, resolves every released
    repository's packages and tarball checksum, and writes one
    xbps-src template per repository.
    """
    pass


cli.add_command(generate_handler, name='generate')
cli.add_command(list_handler, name='list')
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
