"""
Handles the 'generate' command: catalog in, xbps-src templates out.

This command follows our design principles:
- Default output is JSONL streaming, one object per repository
- --table prints a summary table on stderr instead
- Repository failures are reported but never change the exit status
"""

from pathlib import Path

import click
from jinja2 import TemplateError

from ..catalog import fetch_catalog
from ..cli_utils import standard_command, add_common_options
from ..config import load_settings
from ..errors import FetchError, DecodeError
from ..exit_codes import CatalogUnavailableError, CatalogFormatError, ConfigError
from ..infra import HttpClient
from ..recipe import RecipeRenderer, create_environment
from ..render import render_results_table
from ..services import GenerateService


def load_catalog(settings, client):
    """Fetch the catalog, translating failures into command errors."""
    try:
        return fetch_catalog(settings.catalog_url, client)
    except FetchError as e:
        raise CatalogUnavailableError(str(e)) from e
    except DecodeError as e:
        raise CatalogFormatError(str(e)) from e


@click.command(name='generate')
@click.option('-p', '--package', default=None, help='Only generate the recipe for this repository')
@add_common_options('catalog_url')
@click.option('-o', '--output', 'output_path', default=None, type=click.Path(file_okay=False),
              help='Output root directory (default: from config)')
@click.option('--template', 'template_path', default=None, type=click.Path(exists=True, dir_okay=False),
              help='Custom Jinja2 recipe template')
@click.option('--workers', type=int, default=None, help='Number of repositories processed in parallel')
@click.option('--strict-manifests/--lenient-manifests', default=None,
              help='Fail a repository on malformed package.xml instead of ignoring it')
@click.option('--table', is_flag=True, help='Display a summary table instead of JSONL')
@add_common_options('verbose', 'quiet')
@standard_command
def generate_handler(package, catalog_url, output_path, template_path, workers, strict_manifests,
                     table, verbose, quiet):
    """Generate xbps-src templates from the distribution catalog.

    \b
    Processes every repository in the catalog, or only the one given
    with -p. Repositories without a release are skipped silently;
    repositories that fail are logged and skipped.

    Examples:

    \b
        rosvoid generate                       # Whole catalog into ./out
        rosvoid generate -p roscpp_core        # Single repository
        rosvoid generate -o /tmp/srcpkgs --table
    """
    try:
        settings = load_settings(
            catalog_url=catalog_url,
            output_path=output_path,
            max_workers=workers,
            strict_manifests=strict_manifests,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    client = HttpClient(timeout=settings.timeout, user_agent=settings.user_agent)
    catalog = load_catalog(settings, client)

    renderer = None
    if template_path:
        template_path = Path(template_path)
        try:
            env = create_environment(settings, template_path.parent)
            renderer = RecipeRenderer(settings, env.get_template(template_path.name))
        except TemplateError as e:
            raise ConfigError(f"Invalid template {template_path}: {e}") from e

    service = GenerateService(settings, client=client, renderer=renderer)
    results = (result.to_dict() for result in service.generate(catalog, package=package))

    if table:
        render_results_table(list(results))
        return None
    return results
