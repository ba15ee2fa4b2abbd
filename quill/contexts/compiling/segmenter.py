"""
Section Segmentation

Splits dialect-appropriate source into an ordered list of (title, body)
pairs, one strategy per dialect:

- macro-command / commercial-cv: slice between consecutive \\section markers;
  the last section runs to \\end{document} or end of text. No markers means
  no sections.
- generic-article: \\section and \\textbf titles open a section only when the
  title is short and names a recognized resume section; everything else is
  content of the current section (or dropped, before the first title).
- freeform: an all-uppercase line starts a new section.

Article and freeform sources with no recognized title yield one section
carrying the fallback title.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple

from quill.contexts.compiling.config import COMPILER_CONFIG, CompilerConfig
from quill.contexts.compiling.exceptions import LatexParsingError
from quill.contexts.compiling.latex_patterns import DocumentPatterns, FreeformMarkers, SectionRegex
from quill.contexts.compiling.logger import _log_debug
from quill.contexts.compiling.resume_data_structures import Dialect
from quill.utils.latex_parsing_tools import read_command_arguments, strip_comments, to_plaintext

RawSection = Tuple[str, str]


def document_body(source: str) -> str:
    """
    Return the text between \\begin{document} and \\end{document}.

    Missing markers fall back to the start/end of the source.
    """
    start = source.find(DocumentPatterns.BEGIN_DOCUMENT)
    start = 0 if start == -1 else start + len(DocumentPatterns.BEGIN_DOCUMENT)
    end = source.find(DocumentPatterns.END_DOCUMENT, start)
    end = len(source) if end == -1 else end
    return source[start:end]


def _read_title(source: str, pos: int) -> Tuple[str, int]:
    """Read a braced title argument, raising LatexParsingError when unterminated."""
    try:
        params, end_pos = read_command_arguments(source, pos, 1)
    except ValueError as e:
        raise LatexParsingError(
            "Unterminated section title", command="section", latex_snippet=source[pos:]
        ) from e
    return params[0], end_pos


def segment_by_section_markers(source: str, config: CompilerConfig = COMPILER_CONFIG) -> List[RawSection]:
    """
    Segment macro-command and commercial-CV sources on \\section markers.

    Args:
        source: Resume source
        config: Compiler settings (unused, kept for a uniform strategy signature)

    Returns:
        Ordered (title, body) pairs; empty when no marker is found

    Raises:
        LatexParsingError: If a section title brace is never closed
    """
    text = strip_comments(source)
    end_of_document = text.find(DocumentPatterns.END_DOCUMENT)
    if end_of_document == -1:
        end_of_document = len(text)

    starts = [m for m in re.finditer(SectionRegex.SECTION_START, text) if m.start() < end_of_document]

    sections = []
    for i, match in enumerate(starts):
        title, body_start = _read_title(text, match.end())
        body_end = starts[i + 1].start() if i + 1 < len(starts) else end_of_document
        sections.append((to_plaintext(title), text[body_start:body_end]))

    return sections


def _recognized_title(title: str, config: CompilerConfig) -> bool:
    """Check whether a candidate title is a short, recognized resume section name."""
    if not title or len(title) > config.article_max_title_length or title.endswith(":"):
        return False
    lowered = title.lower()
    return any(re.search(rf"\b{re.escape(name)}\b", lowered) for name in config.article_section_names)


def segment_article(source: str, config: CompilerConfig = COMPILER_CONFIG) -> List[RawSection]:
    """
    Segment generic-article sources on recognized bold or \\section titles.

    Content before the first recognized title (typically the name/contact
    header) is dropped. Unterminated candidate titles are skipped.
    """
    body = strip_comments(document_body(source))
    candidate_pattern = f"{SectionRegex.SECTION_START}|{SectionRegex.BOLD_START}"

    titles: List[Tuple[str, int, int]] = []  # (title, start, body_start)
    last_end = 0
    for match in re.finditer(candidate_pattern, body):
        if match.start() < last_end:
            # Inside an accepted title, e.g. \section*{\textbf{Skills}}
            continue
        try:
            params, end_pos = read_command_arguments(body, match.end(), 1)
        except ValueError:
            continue
        title = to_plaintext(params[0])
        if _recognized_title(title, config):
            titles.append((title, match.start(), end_pos))
            last_end = end_pos

    if not titles:
        _log_debug("No recognized article titles, using fallback section")
        return [(config.fallback_section_title, body)]

    sections = []
    for i, (title, _, body_start) in enumerate(titles):
        body_end = titles[i + 1][1] if i + 1 < len(titles) else len(body)
        sections.append((title, body[body_start:body_end]))
    return sections


def is_freeform_marker_line(line: str) -> bool:
    """Check for comment and preamble lines that never carry content."""
    return line.startswith(FreeformMarkers.PREFIXES)


def is_freeform_heading(line: str, config: CompilerConfig = COMPILER_CONFIG) -> bool:
    """Check for an all-uppercase heading line."""
    return len(line) > config.freeform_min_heading_length and re.match(
        SectionRegex.FREEFORM_HEADING, line
    ) is not None


def segment_freeform(source: str, config: CompilerConfig = COMPILER_CONFIG) -> List[RawSection]:
    """
    Segment free-form text on all-uppercase heading lines.

    Lines before the first heading go to a fallback-titled section.
    """
    sections: List[RawSection] = []
    current_title: Optional[str] = None
    current_lines: List[str] = []

    def flush():
        if current_title is not None:
            sections.append((current_title, "\n".join(current_lines)))
        elif any(line.strip() and not is_freeform_marker_line(line.strip()) for line in current_lines):
            sections.append((config.fallback_section_title, "\n".join(current_lines)))

    for line in source.split("\n"):
        stripped = line.strip()
        if is_freeform_heading(stripped, config):
            flush()
            current_title = stripped
            current_lines = []
        else:
            current_lines.append(line)
    flush()

    if not sections:
        sections.append((config.fallback_section_title, "\n".join(current_lines)))
    return sections


SEGMENTERS: Dict[Dialect, Callable[[str, CompilerConfig], List[RawSection]]] = {
    Dialect.MACRO_COMMAND: segment_by_section_markers,
    Dialect.COMMERCIAL_CV: segment_by_section_markers,
    Dialect.GENERIC_ARTICLE: segment_article,
    Dialect.FREEFORM: segment_freeform,
}


def segment_sections(
    source: str, dialect: Dialect, config: CompilerConfig = COMPILER_CONFIG
) -> List[RawSection]:
    """
    Split source into ordered (title, body) pairs using the dialect's strategy.

    Args:
        source: Resume source
        dialect: Dialect from detect_dialect()
        config: Compiler settings

    Returns:
        Sections in source order; bodies are unparsed text
    """
    sections = SEGMENTERS[dialect](source, config)
    _log_debug(f"Segmented {len(sections)} section(s) as {dialect.value}")
    return sections
