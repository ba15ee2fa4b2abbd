"""
Templating Context

Responsibilities:
- Serves the static gallery of starter resume sources
- Looks up a template's source text by id to seed the editor buffer

Owns: Gallery index (gallery.yaml) and the bundled .tex sources
Never: Compiles or renders source text
"""

from quill.contexts.templating.exceptions import TemplateNotFoundError
from quill.contexts.templating.template_gallery import ResumeTemplate, apply_template, list_templates

__all__ = [
    "list_templates",
    "apply_template",
    "ResumeTemplate",
    "TemplateNotFoundError",
]
