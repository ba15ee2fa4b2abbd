"""
Template Gallery

Static lookup of starter resume sources. The gallery index (gallery.yaml)
lists templates in display order; each entry points at a .tex file next to
it. Loading is read-only and nothing is cached across calls, so edits to
the gallery directory show up on the next lookup.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from quill.contexts.templating.exceptions import TemplateNotFoundError
from quill.contexts.templating.logger import _log_debug, _log_warning

load_dotenv()
GALLERY_PATH = Path(os.getenv("QUILL_GALLERY_PATH", Path(__file__).parent / "gallery"))
GALLERY_INDEX = "gallery.yaml"

REQUIRED_KEYS = ("id", "display_name", "file")


@dataclass(frozen=True)
class ResumeTemplate:
    """
    One gallery entry.

    Attributes:
        id: Stable lookup key (e.g., 'moderncv-banking')
        display_name: Human-readable name
        category: Gallery filter group (modern, professional, academic, ...)
        description: One-line summary shown in the gallery
        source_text: Full resume source seeded into the editor
    """

    id: str
    display_name: str
    category: str
    description: str
    source_text: str


def load_gallery(gallery_path: Path = None) -> List[ResumeTemplate]:
    """
    Load every template listed in the gallery index.

    Args:
        gallery_path: Gallery directory (defaults to QUILL_GALLERY_PATH)

    Returns:
        Templates in index order

    Raises:
        FileNotFoundError: If the index or a listed source file is missing
        ValueError: If an index entry lacks a required key or repeats an id
    """
    if gallery_path is None:
        gallery_path = GALLERY_PATH
    gallery_path = Path(gallery_path)

    index_path = gallery_path / GALLERY_INDEX
    if not index_path.exists():
        raise FileNotFoundError(f"Gallery index not found at {index_path}")

    index = OmegaConf.to_container(OmegaConf.load(index_path), resolve=True)

    templates = []
    seen_ids = set()
    for entry in index.get("templates") or []:
        missing = [key for key in REQUIRED_KEYS if not entry.get(key)]
        if missing:
            raise ValueError(f"Gallery entry {entry} is missing: {', '.join(missing)}")
        if entry["id"] in seen_ids:
            raise ValueError(f"Duplicate gallery id '{entry['id']}' in {index_path}")
        seen_ids.add(entry["id"])

        source_path = gallery_path / entry["file"]
        if not source_path.exists():
            raise FileNotFoundError(
                f"Source for template '{entry['id']}' not found at {source_path}"
            )

        templates.append(
            ResumeTemplate(
                id=entry["id"],
                display_name=entry["display_name"],
                category=entry.get("category") or "other",
                description=entry.get("description") or "",
                source_text=source_path.read_text(encoding="utf-8"),
            )
        )

    if not templates:
        _log_warning(f"Gallery at {gallery_path} lists no templates")
    _log_debug(f"Loaded {len(templates)} template(s) from {index_path}")
    return templates


def list_templates(category: Optional[str] = None, gallery_path: Path = None) -> List[ResumeTemplate]:
    """
    List gallery templates in display order.

    Args:
        category: Only return templates in this category (None for all)
        gallery_path: Gallery directory (defaults to QUILL_GALLERY_PATH)

    Returns:
        Ordered list of templates
    """
    templates = load_gallery(gallery_path)
    if category is None:
        return templates
    return [template for template in templates if template.category == category]


def apply_template(template_id: str, gallery_path: Path = None) -> str:
    """
    Return the source text for a template id.

    Args:
        template_id: Gallery id (e.g., 'tech-resume')
        gallery_path: Gallery directory (defaults to QUILL_GALLERY_PATH)

    Returns:
        Template source text

    Raises:
        TemplateNotFoundError: If no template has this id

    Example:
        >>> apply_template("minimal-resume").startswith(r"\\documentclass")
        True
    """
    templates = load_gallery(gallery_path)
    for template in templates:
        if template.id == template_id:
            return template.source_text
    raise TemplateNotFoundError(template_id, available=[template.id for template in templates])
