"""
Compiling Context

Responsibilities:
- Classifies resume source into a dialect (macro-command, commercial-cv, generic-article, freeform)
- Extracts the identity record (name, contact handles)
- Segments source into titled sections and parses each into typed entries
- Resolves inline formatting to safe HTML markup
- Owns the single failure boundary (compile_latex never raises)

Owns: Document model, LaTeX pattern rules, compiler configuration
Never: Writes HTML layout (see rendering context)

The compile_latex facade is imported from quill.contexts.compiling.compiler.
"""

from quill.contexts.compiling.dialect_detector import detect_dialect
from quill.contexts.compiling.exceptions import LatexParsingError
from quill.contexts.compiling.resume_data_structures import (
    Dialect,
    FreeformEntry,
    IdentityRecord,
    LabeledEntry,
    ResumeDocument,
    Section,
    SubheadingEntry,
)

__all__ = [
    "detect_dialect",
    "LatexParsingError",
    # Data structure classes
    "Dialect",
    "IdentityRecord",
    "ResumeDocument",
    "Section",
    "SubheadingEntry",
    "LabeledEntry",
    "FreeformEntry",
]
