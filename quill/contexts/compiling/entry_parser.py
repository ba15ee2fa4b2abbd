"""
Entry Parsing

Turns one section body into an ordered list of entries, one strategy per
dialect:

- macro-command: \\resumeSubheading{title}{date}{subtitle}{location} and
  \\resumeProjectHeading{title}{date} open a subheading entry; the
  \\resumeItem commands inside the following \\resumeItemListStart ...
  \\resumeItemListEnd block become its bullets. Items outside such a block
  are labeled entries (\\textbf{Label:} rest).
- commercial-cv: \\cventry{dates}{position}{organization}{location}{}{body}
  is a subheading entry whose body list becomes bullets; \\cvitem{label}{body}
  and its variants are labeled entries.
- generic-article: blank-line separated paragraphs become freeform entries.
- freeform: every non-empty, non-marker line is a freeform entry.

Structural arguments are read with a brace-depth scanner, so nested
formatting inside bullets is captured at any depth. An argument whose
brace never closes raises LatexParsingError.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple

from markupsafe import Markup

from quill.contexts.compiling.exceptions import LatexParsingError
from quill.contexts.compiling.inline import resolve_inline
from quill.contexts.compiling.latex_patterns import (
    CommercialCvCommands,
    ListEnvironments,
    MacroCommands,
)
from quill.contexts.compiling.resume_data_structures import (
    Dialect,
    Entry,
    FreeformEntry,
    LabeledEntry,
    RichText,
    SubheadingEntry,
)
from quill.contexts.compiling.segmenter import is_freeform_marker_line
from quill.utils.latex_parsing_tools import (
    LaTeXPatterns,
    extract_environment_content,
    extract_itemize_entry,
    find_commands,
    read_command_arguments,
    skip_optional_argument,
    split_itemize_entries,
)
from quill.utils.text_processing import split_paragraphs

# Number of mandatory arguments per structural command
MACRO_COMMAND_ARITY = {
    MacroCommands.SUBHEADING: 4,
    MacroCommands.PROJECT_HEADING: 2,
    MacroCommands.ITEM: 1,
    MacroCommands.SUB_ITEM: 2,
    MacroCommands.LIST_START: 0,
    MacroCommands.LIST_END: 0,
}

COMMERCIAL_CV_ARITY = {
    CommercialCvCommands.ENTRY: 6,
    CommercialCvCommands.ITEM: 2,
    CommercialCvCommands.ITEM_WITH_COMMENT: 3,
    CommercialCvCommands.LIST_ITEM: 1,
    CommercialCvCommands.DOUBLE_ITEM: 4,
}


def _read_arguments(body: str, name: str, start: int, end: int, arity: int) -> Tuple[List[str], int]:
    """Read a structural command's arguments, converting brace errors to LatexParsingError."""
    pos = skip_optional_argument(body, end)
    try:
        return read_command_arguments(body, pos, arity)
    except ValueError as e:
        raise LatexParsingError(
            "Unterminated argument", command=name, latex_snippet=body[start:].strip()
        ) from e


def _iter_structural_commands(body: str, arity: Dict[str, int]):
    """
    Yield (name, params) for structural commands in source order.

    Commands that sit inside an argument already consumed are skipped.
    """
    consumed_until = 0
    for name, start, end in find_commands(body, list(arity)):
        if start < consumed_until:
            continue
        params, consumed_until = _read_arguments(body, name, start, end, arity[name])
        yield name, params


def labeled_entry_from_item(text: str) -> LabeledEntry:
    """
    Build a labeled entry from an item's text.

    \\textbf{Label:} rest and \\textbf{Label}: rest carry a label;
    anything else is a bare body.
    """
    match = re.match(MacroCommands.LABELED_ITEM, text, flags=re.DOTALL)
    if match:
        return LabeledEntry(label=resolve_inline(match.group(1)), body=resolve_inline(match.group(2)))
    return LabeledEntry(body=resolve_inline(text))


def _next_list_environment(text: str, pos: int) -> Optional[Tuple[str, int]]:
    """Find the earliest list environment opening at or after pos."""
    earliest = None
    for env_name in ListEnvironments.NAMES:
        match = re.search(LaTeXPatterns.BEGIN_ENV.format(env=env_name), text[pos:])
        if match and (earliest is None or pos + match.start() < earliest[1]):
            earliest = (env_name, pos + match.start())
    return earliest


def extract_bullets(text: str) -> Tuple[List[RichText], str]:
    """
    Pull itemize/enumerate items out of text.

    A list environment that is never closed runs to the end of the text.

    Returns:
        (bullets, prose) where prose is the text outside the lists

    Example:
        >>> extract_bullets(r"Intro \\begin{itemize}\\item A\\item B\\end{itemize}")
        ([Markup('A'), Markup('B')], 'Intro')
    """
    bullets: List[RichText] = []
    prose_parts: List[str] = []
    pos = 0

    while True:
        found = _next_list_environment(text, pos)
        if found is None:
            prose_parts.append(text[pos:])
            break

        env_name, begin_pos = found
        prose_parts.append(text[pos:begin_pos])
        try:
            content, _, pos = extract_environment_content(text, env_name, begin_pos)
        except ValueError:
            content, pos = text[begin_pos:], len(text)

        for entry in split_itemize_entries(content):
            bullets.append(resolve_inline(extract_itemize_entry(entry)["latex_raw"]))

    prose = " ".join(part.strip() for part in prose_parts if part.strip())
    return bullets, prose


def bullet_list_markup(bullets: List[RichText]) -> RichText:
    """Render bullets as an inline <ul> block."""
    if not bullets:
        return Markup("")
    items = Markup("").join(Markup("<li>{}</li>").format(bullet) for bullet in bullets)
    return Markup("<ul>{}</ul>").format(items)


def parse_macro_command_entries(body: str) -> List[Entry]:
    """Parse a macro-command (resumeSubheading family) section body."""
    entries: List[Entry] = []
    current: Optional[SubheadingEntry] = None
    in_list = False
    found_any = False

    for name, params in _iter_structural_commands(body, MACRO_COMMAND_ARITY):
        found_any = True

        if name == MacroCommands.SUBHEADING:
            title, date_range, subtitle, location = (resolve_inline(p) for p in params)
            current = SubheadingEntry(title=title, date_range=date_range, subtitle=subtitle, location=location)
            entries.append(current)
        elif name == MacroCommands.PROJECT_HEADING:
            title, date_range = (resolve_inline(p) for p in params)
            current = SubheadingEntry(title=title, date_range=date_range)
            entries.append(current)
        elif name == MacroCommands.LIST_START:
            in_list = True
        elif name == MacroCommands.LIST_END:
            in_list = False
            current = None
        elif name == MacroCommands.ITEM:
            if in_list and current is not None:
                current.bullets.append(resolve_inline(params[0]))
            else:
                entries.append(labeled_entry_from_item(params[0]))
        elif name == MacroCommands.SUB_ITEM:
            label, text = (resolve_inline(p) for p in params)
            if in_list and current is not None:
                current.bullets.append(Markup("<strong>{}</strong>: {}").format(label, text))
            else:
                entries.append(LabeledEntry(label=label or None, body=text))

    if not found_any:
        return parse_article_entries(body)
    return entries


def parse_commercial_cv_entries(body: str) -> List[Entry]:
    """Parse a commercial-CV (moderncv) section body."""
    entries: List[Entry] = []
    found_any = False

    for name, params in _iter_structural_commands(body, COMMERCIAL_CV_ARITY):
        found_any = True

        if name == CommercialCvCommands.ENTRY:
            dates, position, organization, location, _unused, entry_body = params
            bullets, prose = extract_bullets(entry_body)
            entries.append(
                SubheadingEntry(
                    title=resolve_inline(position),
                    date_range=resolve_inline(dates),
                    subtitle=resolve_inline(organization),
                    location=resolve_inline(location),
                    bullets=bullets,
                    description=resolve_inline(prose) if prose else None,
                )
            )
        elif name == CommercialCvCommands.ITEM:
            label, text = params
            entries.append(LabeledEntry(label=resolve_inline(label) or None, body=resolve_inline(text)))
        elif name == CommercialCvCommands.ITEM_WITH_COMMENT:
            label, text, comment = params
            entry_body = resolve_inline(text)
            if comment.strip():
                entry_body = Markup("{} <em>{}</em>").format(entry_body, resolve_inline(comment))
            entries.append(LabeledEntry(label=resolve_inline(label) or None, body=entry_body))
        elif name == CommercialCvCommands.LIST_ITEM:
            entries.append(LabeledEntry(body=resolve_inline(params[0])))
        elif name == CommercialCvCommands.DOUBLE_ITEM:
            for label, text in (params[0:2], params[2:4]):
                if label.strip() or text.strip():
                    entries.append(LabeledEntry(label=resolve_inline(label) or None, body=resolve_inline(text)))

    if not found_any:
        return parse_article_entries(body)
    return entries


def parse_article_entries(body: str) -> List[Entry]:
    """
    Parse a generic-article section body into paragraph entries.

    Leading line breaks left over from the title are dropped, \\vspace acts
    as a paragraph break and list environments render as bullet lists.
    """
    text = re.sub(r"^(?:\s*\\\\(?:\[[^\]]*\])?)+", "", body)
    text = re.sub(LaTeXPatterns.SPACING_COMMANDS, "\n\n", text)

    entries: List[Entry] = []
    for paragraph in split_paragraphs(text):
        bullets, prose = extract_bullets(paragraph)
        rich = resolve_inline(prose) + bullet_list_markup(bullets)
        if rich:
            entries.append(FreeformEntry(text=rich))
    return entries


def parse_freeform_entries(body: str) -> List[Entry]:
    """Every non-empty, non-marker line becomes one freeform entry."""
    entries: List[Entry] = []
    for line in body.split("\n"):
        stripped = line.strip()
        if not stripped or is_freeform_marker_line(stripped):
            continue
        entries.append(FreeformEntry(text=resolve_inline(stripped)))
    return entries


ENTRY_PARSERS: Dict[Dialect, Callable[[str], List[Entry]]] = {
    Dialect.MACRO_COMMAND: parse_macro_command_entries,
    Dialect.COMMERCIAL_CV: parse_commercial_cv_entries,
    Dialect.GENERIC_ARTICLE: parse_article_entries,
    Dialect.FREEFORM: parse_freeform_entries,
}


def parse_entries(section_body: str, dialect: Dialect) -> List[Entry]:
    """
    Parse one section body with the dialect's strategy.

    Args:
        section_body: Unparsed section text from segment_sections()
        dialect: Dialect from detect_dialect()

    Returns:
        Entries in source order

    Raises:
        LatexParsingError: If a structural command argument is unterminated
    """
    return ENTRY_PARSERS[dialect](section_body)
