"""
Rendering Registries

Registry for loading and caching the HTML templates used by the renderer.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from quill.contexts.rendering.logger import _log_debug

load_dotenv()
RENDER_TEMPLATES_PATH = Path(
    os.getenv("QUILL_RENDER_TEMPLATES_PATH", Path(__file__).parent / "templates")
)


class HtmlTemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML rendering.

    Templates are stored in quill/contexts/rendering/templates/{name}.html.jinja
    and rendered with autoescaping: plain strings are escaped, Markup values
    (resolved rich text) pass through unchanged.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to
                            QUILL_RENDER_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = RENDER_TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without extension (e.g., 'resume')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_path = self.get_template_path(name)
        template_file = template_path.name
        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(f"HTML template '{name}' not found at {template_path}") from e

        _log_debug(f"Loaded template {template_file}")
        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a template."""
        return self.templates_path / f"{name}.html.jinja"
