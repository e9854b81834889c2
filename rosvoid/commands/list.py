"""
Handles the 'list' command: show catalog entries as JSONL.
"""

import click

from ..cli_utils import standard_command, add_common_options
from ..config import load_settings
from ..infra import HttpClient
from .generate import load_catalog


@click.command(name='list')
@add_common_options('catalog_url')
@click.option('--released-only', is_flag=True, help='Only list repositories with a release channel')
@add_common_options('verbose', 'quiet')
@standard_command
def list_handler(catalog_url, released_only, verbose, quiet):
    """List repositories in the distribution catalog.

    \b
    Examples:
        rosvoid list
        rosvoid list --released-only
    """
    settings = load_settings(catalog_url=catalog_url)
    client = HttpClient(timeout=settings.timeout, user_agent=settings.user_agent)
    catalog = load_catalog(settings, client)

    for name in sorted(catalog.repositories):
        record = catalog.repositories[name]
        if released_only and not record.has_release:
            continue
        yield {
            'name': name,
            'release_version': record.release.version if record.release else None,
            'packages': record.subpackage_names,
            'source_url': record.source.url,
            'source_version': record.source.version,
            'status': record.status,
        }
