"""
LaTeX Pattern Constants

Centralized LaTeX pattern strings used for dialect detection, segmentation,
entry parsing and identity extraction.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DocumentPatterns:
    """
    Document-level LaTeX patterns.

    Used for dialect detection and document boundary detection.
    """
    DOCUMENTCLASS: str = r'\\documentclass\s*(?:\[[^\]]*\])?\s*\{{\s*{cls}\s*\}}'
    COMMERCIAL_CV_CLASS: str = 'moderncv'
    ARTICLE_CLASS: str = 'article'
    BEGIN_DOCUMENT: str = r'\begin{document}'
    END_DOCUMENT: str = r'\end{document}'


@dataclass(frozen=True)
class SectionRegex:
    """
    Section heading patterns.

    SECTION_START stops right before the opening brace of the title argument.
    """
    SECTION_START: str = r'\\section\*?\s*(?=\{)'
    BOLD_START: str = r'\\textbf\s*(?=\{)'
    FREEFORM_HEADING: str = r'^[A-Z][A-Z\s]+$'


@dataclass(frozen=True)
class MacroCommands:
    """
    Structural commands of the macro-command dialect (resumeSubheading family).
    """
    SUBHEADING: str = 'resumeSubheading'
    PROJECT_HEADING: str = 'resumeProjectHeading'
    ITEM: str = 'resumeItem'
    SUB_ITEM: str = 'resumeSubItem'
    LIST_START: str = 'resumeItemListStart'
    LIST_END: str = 'resumeItemListEnd'
    # Detection markers, any one of them is enough
    MARKERS: Tuple[str, ...] = (
        'resumeSubheading',
        'resumeItem',
        'resumeProjectHeading',
        'resumeItemListStart',
    )
    # \textbf{Label:} rest, or \textbf{Label}: rest
    LABELED_ITEM: str = r'^\s*\\textbf\s*\{\s*([^{}:]*?)\s*(?::\s*\}|\}\s*:)\s*(.*)$'


@dataclass(frozen=True)
class CommercialCvCommands:
    """
    Structural commands of the commercial-CV (moderncv) dialect.
    """
    ENTRY: str = 'cventry'
    ITEM: str = 'cvitem'
    ITEM_WITH_COMMENT: str = 'cvitemwithcomment'
    LIST_ITEM: str = 'cvlistitem'
    DOUBLE_ITEM: str = 'cvdoubleitem'
    # Detection markers for sources without a moderncv \documentclass
    MARKERS: Tuple[str, ...] = (
        'cventry',
        'cvitem',
        'cvitemwithcomment',
        'cvlistitem',
        'cvdoubleitem',
    )
    # \name{First}{Last}
    TWO_PART_NAME: str = r'\\name\s*\{[^{}]*\}\s*\{[^{}]*\}'


@dataclass(frozen=True)
class ListEnvironments:
    """List environments converted to bullets."""
    NAMES: Tuple[str, ...] = ('itemize', 'enumerate')


@dataclass(frozen=True)
class FreeformMarkers:
    """Line prefixes that never become freeform entries."""
    PREFIXES: Tuple[str, ...] = (
        '%',
        r'\documentclass',
        r'\usepackage',
        r'\begin{document}',
        r'\end{document}',
    )


@dataclass(frozen=True)
class UnsafePatterns:
    """
    Shell-escape and file-access constructs stripped before parsing.
    """
    VERBATIM: str = r'\\begin\{verbatim\}.*?\\end\{verbatim\}'
    SHELL_ESCAPE: str = r'\\immediate\s*\\write\d*\s*\{[^}]*\}'
    WRITE: str = r'\\write\d*\s*\{[^}]*\}'
    FILE_ACCESS: str = r'\\(?:input|include|includeonly)(?![A-Za-z])\s*(?:\[[^\]]*\])?\s*\{[^}]*\}'
    CATCODE: str = r'\\catcode[^=\n]*=\s*\d*'


@dataclass(frozen=True)
class IdentityRules:
    """
    Ordered extraction rules per identity field.

    Rules run most dialect-specific first. The first rule that matches supplies
    the field. Patterns with two groups (first, last) are joined with a space.
    Inline flags carry DOTALL/MULTILINE where a rule needs them.
    """
    NAME: Tuple[str, ...] = (
        r'\\name\s*\{([^}]+)\}\s*\{([^}]+)\}',
        r'\{\\Huge\s*\\scshape\s*([^}]+)\}',
        r'\{\\(?:Large|LARGE|huge|Huge)\s*\\textbf\s*\{((?:[^{}]|\{[^{}]*\})+)\}\s*\}',
        r'(?s)\\begin\{center\}.*?\{\\Huge\s*((?:[^{}]|\{[^{}]*\})+)\}',
        r'(?m)^([A-Z][a-z]+[ \t]+[A-Z][a-z]+)[ \t]*$',
    )
    EMAIL: Tuple[str, ...] = (
        r'\\email\s*\{([^}]+)\}',
        r'\\href\s*\{mailto:([^}]+)\}',
        r'\\faEnvelope\\?\s*~?\s*([^$\s}\\]+)',
        r'([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})',
    )
    PHONE: Tuple[str, ...] = (
        r'\\phone\s*\[mobile\]\s*\{([^}]+)\}',
        r'\\phone\s*(?:\[[^\]]*\])?\s*\{([^}]+)\}',
        r'\\faPhone\\?\s*~?\s*([^$\s}\\]+)',
        r'(\+\d{1,3}[-\s]?\d{10}|\(\d{3}\)\s?\d{3}-\d{4})',
    )
    LINKEDIN: Tuple[str, ...] = (
        r'\\social\s*\[linkedin\]\s*\{([^}]+)\}',
        r'\\href\s*\{https?://(?:www\.)?linkedin\.com/in/([^}/]+)/?\}',
        r'\\faLinkedin\\?\s*~?\s*([^$\s}\\]+)',
        r'linkedin\.com/in/([^}\s$/]+)',
    )
    GITHUB: Tuple[str, ...] = (
        r'\\social\s*\[github\]\s*\{([^}]+)\}',
        r'\\href\s*\{https?://(?:www\.)?github\.com/([^}/]+)/?\}',
        r'\\faGithub\\?\s*~?\s*([^$\s}\\]+)',
        r'github\.com/([^}\s$/|]+)',
    )
    HOMEPAGE: Tuple[str, ...] = (
        r'\\homepage\s*\{([^}]+)\}',
        r'\\url\s*\{([^}]+)\}',
        r'(https?://[^\s}]+)',
    )
