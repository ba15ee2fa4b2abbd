"""
Resume Data Structures

Defines the document model produced by the compiling pipeline: dialect tag,
identity record, sections and the three entry variants.
Every instance is built fresh per compile call and never shared.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import List, Optional, Union

from markupsafe import Markup

# Text whose inline commands are already resolved to HTML markup
RichText = Markup


class Dialect(str, Enum):
    """Recognized conventions for structuring resume source text."""

    MACRO_COMMAND = "macro-command"
    COMMERCIAL_CV = "commercial-cv"
    GENERIC_ARTICLE = "generic-article"
    FREEFORM = "freeform"


@dataclass
class IdentityRecord:
    """
    Best-effort identity extracted from the whole source.

    Attributes:
        name: Full name
        email: Email address
        phone: Phone number as written
        linkedin_handle: LinkedIn profile handle (the part after /in/)
        github_handle: GitHub user name
        homepage: Personal homepage URL or host
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin_handle: Optional[str] = None
    github_handle: Optional[str] = None
    homepage: Optional[str] = None

    def is_empty(self) -> bool:
        """True when no field was extracted."""
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass
class SubheadingEntry:
    """
    Experience/education-style record.

    Attributes:
        title: Heading line (position, school, project)
        date_range: Date or date range as written
        subtitle: Secondary line (organization, degree)
        location: Location
        bullets: Ordered bullet points
        description: Prose that accompanies or replaces the bullets
    """

    title: RichText
    date_range: RichText = field(default_factory=RichText)
    subtitle: RichText = field(default_factory=RichText)
    location: RichText = field(default_factory=RichText)
    bullets: List[RichText] = field(default_factory=list)
    description: Optional[RichText] = None


@dataclass
class LabeledEntry:
    """Skills/summary-style single-line record."""

    body: RichText
    label: Optional[RichText] = None


@dataclass
class FreeformEntry:
    """Paragraph or line of unstructured text."""

    text: RichText


Entry = Union[SubheadingEntry, LabeledEntry, FreeformEntry]


@dataclass
class Section:
    """
    Titled section of a resume.

    Attributes:
        title: Section title as plain text
        entries: Ordered entries; may be empty
    """

    title: str
    entries: List[Entry] = field(default_factory=list)


@dataclass
class ResumeDocument:
    """
    Structured resume in source order.

    Attributes:
        dialect: Dialect the source was parsed as
        sections: Sections in source order
    """

    dialect: Dialect
    sections: List[Section] = field(default_factory=list)
