"""
Compiler Facade

Single entry point of the pipeline and its only failure boundary:

    source -> sanitize -> detect -> {extract identity, segment -> parse entries} -> render

Blank source short-circuits to the placeholder prompt. Any exception raised
by a stage is caught here and turned into an error-bearing CompileResult
whose html is a rendered error fragment, so callers always get a complete
renderable fragment back and never need to handle an exception.
"""

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from quill.contexts.compiling.dialect_detector import detect_dialect
from quill.contexts.compiling.entry_parser import parse_entries
from quill.contexts.compiling.identity_extractor import extract_identity
from quill.contexts.compiling.logger import _log_debug, _log_error, log_compile_result
from quill.contexts.compiling.resume_data_structures import (
    Dialect,
    IdentityRecord,
    ResumeDocument,
    Section,
)
from quill.contexts.compiling.sanitizer import strip_unsafe_commands
from quill.contexts.compiling.segmenter import segment_sections
from quill.contexts.rendering.renderer import render_document, render_error, render_placeholder
from quill.utils.text_processing import count_words
from quill.utils.timestamp import now


@dataclass
class CompileResult:
    """
    Result from compile_latex().

    html is always a complete fragment: placeholder, error fragment or the
    rendered resume. last_compiled_at is reported beside the html, never in it.
    """

    html: str
    last_compiled_at: datetime
    error: Optional[str] = None
    dialect: Optional[Dialect] = None
    # Editor status-bar figures, measured on the raw source
    word_count: int = 0
    char_count: int = 0

    @property
    def success(self) -> bool:
        return self.error is None


def build_document(source: str) -> Tuple[ResumeDocument, IdentityRecord]:
    """
    Run every parsing stage on non-blank source.

    Args:
        source: Resume source

    Returns:
        (document, identity)

    Raises:
        LatexParsingError: If a structural argument is unterminated
    """
    clean = strip_unsafe_commands(source)
    dialect = detect_dialect(clean)
    _log_debug(f"Detected dialect: {dialect.value}")

    identity = extract_identity(clean)
    sections = [
        Section(title=title, entries=parse_entries(body, dialect))
        for title, body in segment_sections(clean, dialect)
    ]
    return ResumeDocument(dialect=dialect, sections=sections), identity


def compile_latex(source: str) -> CompileResult:
    """
    Compile resume source text to a self-contained HTML fragment.

    Never raises. Compiling the same source twice yields identical html.

    Args:
        source: Resume source in any supported dialect (may be empty)

    Returns:
        CompileResult with html always set; error set when the pipeline failed

    Example:
        >>> compile_latex("").error is None
        True
        >>> compile_latex(r"\\section{Work}\\resumeItem{unclosed").error
        'Unterminated argument'
    """
    start_time = time.time()
    source = source or ""
    word_count, char_count = count_words(source), len(source)

    if not source.strip():
        _log_debug("Empty source, rendering placeholder")
        return CompileResult(
            html=render_placeholder(),
            last_compiled_at=now(),
            word_count=word_count,
            char_count=char_count,
        )

    try:
        document, identity = build_document(source)
        result = CompileResult(
            html=render_document(document, identity),
            last_compiled_at=now(),
            dialect=document.dialect,
            word_count=word_count,
            char_count=char_count,
        )
    except Exception as e:
        message = str(e) or type(e).__name__
        _log_error(f"{type(e).__name__}: {message}")
        result = CompileResult(
            html=render_error(message),
            last_compiled_at=now(),
            error=message.splitlines()[0],
            word_count=word_count,
            char_count=char_count,
        )

    log_compile_result(result, time.time() - start_time)
    return result
