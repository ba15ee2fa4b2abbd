"""
Document Rendering

Produces the final self-contained HTML fragment from a ResumeDocument and
an IdentityRecord. Emits, in order:

1. an identity header, only when at least one identity field is present
2. one block per section: title, then each entry rendered by variant
   (subheading -> title/subtitle/date row plus bullets,
    labeled -> "label: body", freeform -> paragraph)

The fixed stylesheet is inlined into every fragment. Rendering is pure:
the same inputs always give the same output.
"""

from typing import Dict, List, Optional, Tuple

from quill.contexts.compiling.resume_data_structures import (
    Entry,
    FreeformEntry,
    IdentityRecord,
    LabeledEntry,
    ResumeDocument,
    SubheadingEntry,
)
from quill.contexts.rendering.logger import _log_debug
from quill.contexts.rendering.registries import HtmlTemplateRegistry

# Entry variant -> template macro name
ENTRY_KINDS = {
    SubheadingEntry: "subheading",
    LabeledEntry: "labeled",
    FreeformEntry: "freeform",
}

SAFE_LINK_PREFIXES = ("http://", "https://")

_registry = HtmlTemplateRegistry()


def _contact_items(identity: IdentityRecord) -> List[Dict[str, Optional[str]]]:
    """
    Build the header contact line as (kind, text, href) dicts in display order.

    Only http(s) homepages become links; anything else is shown as text.
    """
    items = []
    if identity.phone:
        items.append({"kind": "phone", "text": identity.phone, "href": None})
    if identity.email:
        items.append({"kind": "email", "text": identity.email, "href": f"mailto:{identity.email}"})
    if identity.linkedin_handle:
        items.append({
            "kind": "linkedin",
            "text": identity.linkedin_handle,
            "href": f"https://www.linkedin.com/in/{identity.linkedin_handle}",
        })
    if identity.github_handle:
        items.append({
            "kind": "github",
            "text": identity.github_handle,
            "href": f"https://github.com/{identity.github_handle}",
        })
    if identity.homepage:
        href = identity.homepage if identity.homepage.startswith(SAFE_LINK_PREFIXES) else None
        items.append({"kind": "homepage", "text": identity.homepage, "href": href})
    return items


def _tag_entries(entries: List[Entry]) -> List[Tuple[str, Entry]]:
    return [(ENTRY_KINDS[type(entry)], entry) for entry in entries]


def render_document(document: ResumeDocument, identity: IdentityRecord) -> str:
    """
    Render a parsed resume to a self-contained HTML fragment.

    Args:
        document: Parsed sections in source order
        identity: Extracted identity; an empty record renders no header

    Returns:
        HTML fragment with inline stylesheet
    """
    sections = [
        {"title": section.title, "entries": _tag_entries(section.entries)}
        for section in document.sections
    ]
    _log_debug(
        f"Rendering {len(sections)} section(s), header {'omitted' if identity.is_empty() else 'shown'}"
    )
    return _registry.get_template("resume").render(
        identity=None if identity.is_empty() else identity,
        contacts=_contact_items(identity),
        sections=sections,
    )


def render_placeholder() -> str:
    """Render the prompt shown for empty source."""
    return _registry.get_template("placeholder").render()


def render_error(message: str) -> str:
    """Render the user-visible error fragment for a failed compile."""
    return _registry.get_template("error").render(message=message)
