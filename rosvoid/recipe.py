"""
Recipe rendering with Jinja2.

Executes the xbps-src template against an EnrichedRepository and writes
it to ``<output root>/<prefix>-<name>/template``.
"""

import logging
from functools import partial
from pathlib import Path
from typing import Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    Template,
    TemplateError,
)

from .config import Settings
from .domain import EnrichedRepository
from .errors import RenderError
from .format_utils import (
    normalize_package_name,
    normalize_version,
    truncate_description,
    wrap_dependency_list,
)

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "template.j2"


def create_environment(settings: Settings, template_dir: Optional[Path] = None) -> Environment:
    """Build a Jinja2 environment with the recipe filters registered."""
    if template_dir is not None:
        loader = FileSystemLoader(str(template_dir))
    else:
        loader = PackageLoader("rosvoid", "templates")

    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters['fmt'] = normalize_package_name
    env.filters['fmt_version'] = normalize_version
    env.filters['fmt_desc'] = truncate_description
    env.globals['fmt_list'] = partial(wrap_dependency_list, prefix=settings.prefix)
    return env


def recipe_directory(name: str, output_root: Path, prefix: str) -> Path:
    """Directory holding the recipe for repository ``name``."""
    return Path(output_root) / f"{prefix}-{normalize_package_name(name)}"


def _wrksrc(enriched: EnrichedRepository, distro: str) -> str:
    """Directory the hosting service unpacks the release tag archive into."""
    release = enriched.release
    repo = release.url.rstrip('/').rsplit('/', 1)[-1]
    if repo.endswith('.git'):
        repo = repo[:-len('.git')]
    return f"{repo}-release-{distro}-{enriched.name}-{release.version}"


class RecipeRenderer:
    """
    Renders recipes for enriched repositories.

    Example:
        renderer = RecipeRenderer(settings)
        path = renderer.render(enriched)
    """

    def __init__(self, settings: Settings, template: Optional[Template] = None):
        """
        Initialize RecipeRenderer.

        Args:
            settings: Effective run settings
            template: Pre-built template (loads the packaged one if None)
        """
        self.settings = settings
        if template is None:
            template = create_environment(settings).get_template(DEFAULT_TEMPLATE)
        self.template = template

    def render_text(self, enriched: EnrichedRepository) -> str:
        """
        Execute the template for ``enriched``.

        Raises:
            RenderError: If template execution fails
        """
        if not enriched.is_renderable:
            raise RenderError(
                enriched.name,
                ValueError(f"not renderable (state {enriched.state.value}, "
                           f"{len(enriched.sub_packages)} sub-packages)"),
            )

        try:
            return self.template.render(
                repo=enriched,
                prefix=self.settings.prefix,
                distro=self.settings.distro,
                python_version=self.settings.python_version,
                maintainer=self.settings.maintainer,
                license=self.settings.license,
                wrksrc=_wrksrc(enriched, self.settings.distro),
            )
        except TemplateError as e:
            raise RenderError(enriched.name, e) from e
        except Exception as e:
            # Filters and globals called from a custom template
            raise RenderError(enriched.name, e) from e

    def render(self, enriched: EnrichedRepository, output_root: Optional[Path] = None) -> Path:
        """
        Render and write the recipe for ``enriched``.

        Returns:
            Path of the written recipe file

        Raises:
            RenderError: If template execution or writing fails
        """
        output_root = Path(output_root or self.settings.output_path)
        text = self.render_text(enriched)

        directory = recipe_directory(enriched.name, output_root, self.settings.prefix)
        path = directory / self.settings.recipe_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding='utf-8')
        except OSError as e:
            raise RenderError(enriched.name, e) from e

        logger.debug(f"Wrote {path}")
        return path


def render_recipe(enriched: EnrichedRepository, output_root: Path, settings: Settings,
                  template: Optional[Template] = None) -> Path:
    """Render a single recipe; convenience wrapper around RecipeRenderer."""
    return RecipeRenderer(settings, template).render(enriched, output_root)
