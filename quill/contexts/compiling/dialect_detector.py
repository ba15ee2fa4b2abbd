"""
Dialect Detection

Classifies resume source into one of the four supported dialects by
testing document-level markers in a fixed priority order:

1. commercial-CV document class (moderncv)  -> commercial-cv
2. any macro-command structural command     -> macro-command
3. article document class                   -> generic-article
4. moderncv commands or \\name{First}{Last}  -> commercial-cv
5. nothing recognized                       -> freeform

Most specific wins: an article-class document that also uses
\\resumeSubheading is macro-command, a moderncv document that happens to
contain \\resumeItem is commercial-cv. Step 4 catches moderncv fragments
pasted without their preamble; a declared article class still wins over it.
"""

import re

from quill.contexts.compiling.latex_patterns import CommercialCvCommands, DocumentPatterns, MacroCommands
from quill.contexts.compiling.resume_data_structures import Dialect
from quill.utils.latex_parsing_tools import find_commands


def has_document_class(source: str, class_name: str) -> bool:
    """Check for a \\documentclass[...]{class_name} declaration."""
    pattern = DocumentPatterns.DOCUMENTCLASS.format(cls=re.escape(class_name))
    return re.search(pattern, source) is not None


def has_macro_commands(source: str) -> bool:
    """Check for any structural command of the macro-command dialect."""
    return next(find_commands(source, MacroCommands.MARKERS), None) is not None


def has_commercial_cv_commands(source: str) -> bool:
    """Check for moderncv structural commands or a two-part \\name."""
    if next(find_commands(source, CommercialCvCommands.MARKERS), None) is not None:
        return True
    return re.search(CommercialCvCommands.TWO_PART_NAME, source) is not None


def detect_dialect(source: str) -> Dialect:
    """
    Classify source text into a dialect.

    Pure and total: always returns a Dialect.

    Args:
        source: Raw resume source

    Returns:
        Detected Dialect

    Example:
        >>> detect_dialect(r"\\documentclass{moderncv}\\resumeItem{x}")
        <Dialect.COMMERCIAL_CV: 'commercial-cv'>
        >>> detect_dialect(r"\\name{Jane}{Doe}\\section{Skills}")
        <Dialect.COMMERCIAL_CV: 'commercial-cv'>
        >>> detect_dialect("JOHN DOE")
        <Dialect.FREEFORM: 'freeform'>
    """
    if has_document_class(source, DocumentPatterns.COMMERCIAL_CV_CLASS):
        return Dialect.COMMERCIAL_CV
    if has_macro_commands(source):
        return Dialect.MACRO_COMMAND
    if has_document_class(source, DocumentPatterns.ARTICLE_CLASS):
        return Dialect.GENERIC_ARTICLE
    if has_commercial_cv_commands(source):
        return Dialect.COMMERCIAL_CV
    return Dialect.FREEFORM
