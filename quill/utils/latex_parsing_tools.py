"""
LaTeX Parsing Tools

Fundamental parsing utilities for extracting LaTeX structures.

Self-contained module with no project dependencies outside quill.utils - designed for reusability.
All LaTeX patterns are defined as constants below for visibility and maintainability.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Sequence, Tuple

from quill.utils.text_processing import extract_balanced_delimiters


@dataclass(frozen=True)
class LaTeXPatterns:
    """
    LaTeX pattern templates for parsing and manipulation.

    These are format string templates that accept command/environment names.
    Use .format() or f-strings to substitute the command name.
    """

    # Command patterns (use with .format(command=name))
    COMMAND_NAMES: str = r"\\({names})(?![A-Za-z])"  # Matches any of \a, \b, captures name

    # Environment patterns (use with .format(env=name))
    BEGIN_ENV: str = r"\\begin\{{{env}\}}"  # Matches \begin{envname}
    END_ENV: str = r"\\end\{{{env}\}}"  # Matches \end{envname}

    # Itemize marker pattern (use with named group (?P<marker>...))
    ITEM_ANY: str = r"\\(?P<marker>item(?:\[[^\]]*\])?)(?![A-Za-z])"  # Matches \item and \item[--]

    # Comments: unescaped % to end of line
    COMMENT: str = r"(?<!\\)%.*$"

    # Plaintext conversion patterns (for stripping LaTeX in to_plaintext())
    COLOR_WITH_TEXT: str = (
        r"\\color\{[^}]+\}\{([^}]*)\}"  # Matches \color{red}{text}, captures text
    )
    COLOR_STANDALONE: str = r"\\color\{[^}]+\}"  # Matches \color{red}, removes entirely
    SPACING_COMMANDS: str = r"\\[vh]space\*?\{[^}]*\}"  # Matches \vspace{...} or \hspace{...}
    ANY_COMMAND_WITH_BRACES: str = r"\\[a-zA-Z]+\*?\{[^}]*\}"  # Matches any \command{...}
    ANY_COMMAND_NO_BRACES: str = r"\\[a-zA-Z]+\*?"  # Matches any \command


def find_commands(text: str, names: Sequence[str]) -> Iterator[Tuple[str, int, int]]:
    """
    Find occurrences of the named commands in source order.

    A command only matches as a whole word, so \\resumeItem does not match
    inside \\resumeItemListStart.

    Args:
        text: LaTeX source
        names: Command names without backslash

    Yields:
        (name, start, end) where start is at the backslash and end is right after the name

    Example:
        >>> list(find_commands(r"\\cvitem{a}{b}\\cventry", ["cventry", "cvitem"]))
        [('cvitem', 0, 7), ('cventry', 13, 21)]
    """
    # Longest names first so alternation never stops at a shorter prefix
    ordered = sorted(names, key=len, reverse=True)
    pattern = LaTeXPatterns.COMMAND_NAMES.format(names="|".join(re.escape(n) for n in ordered))
    for match in re.finditer(pattern, text):
        yield match.group(1), match.start(), match.end()


def skip_optional_argument(text: str, pos: int) -> int:
    """
    Skip one optional [...] argument starting at pos (after whitespace).

    Returns:
        Position after the closing bracket, or pos unchanged if no [ follows
    """
    match = re.match(r"\s*\[", text[pos:])
    if not match:
        return pos
    try:
        _, end_pos = extract_balanced_delimiters(
            text, pos + match.end(), open_char="[", close_char="]"
        )
    except ValueError:
        return pos
    return end_pos


def read_command_arguments(text: str, pos: int, num_params: int) -> Tuple[List[str], int]:
    """
    Read N sequential brace-delimited arguments from pos, handling nested braces.

    Uses brace counting, so nesting depth is unlimited. An argument that is
    absent (next non-space character is not an opening brace) is returned as
    an empty string and no further arguments are read.

    Args:
        text: LaTeX source
        pos: Position right after the command name
        num_params: Number of {...} arguments to read

    Returns:
        (params, end_pos) where params always has num_params entries

    Raises:
        ValueError: If an opening brace is never closed

    Example:
        >>> read_command_arguments(r"\\cvitem{Langs}{\\textbf{Go}} tail", 7, 2)
        (['Langs', '\\\\textbf{Go}'], 27)
    """
    params = []
    for _ in range(num_params):
        match = re.match(r"\s*\{", text[pos:])
        if not match:
            break
        content, pos = extract_balanced_delimiters(text, pos + match.end())
        params.append(content)

    params.extend([""] * (num_params - len(params)))
    return params, pos


def extract_environment_content(
    text: str, env_name: str, start_pos: int = 0
) -> Tuple[str, int, int]:
    """
    Extract content from LaTeX environment, handling nested environments.

    Finds \\begin{env_name} and matching \\end{env_name}, correctly handling
    nested environments of the same name.

    Args:
        text: LaTeX text
        env_name: Environment name (e.g., 'itemize', 'enumerate')
        start_pos: Position to start searching (default: 0)

    Returns:
        (content, begin_pos, end_pos) where:
        - content: Text between \\begin{env} and \\end{env}
        - begin_pos: Position at the start of \\begin{env_name}
        - end_pos: Position after \\end{env_name}

    Raises:
        ValueError: If environment is not found or unmatched

    Example:
        >>> text = "\\\\begin{itemize} foo \\\\begin{itemize} bar \\\\end{itemize} \\\\end{itemize}"
        >>> content, _, _ = extract_environment_content(text, "itemize")
        >>> content
        ' foo \\\\begin{itemize} bar \\\\end{itemize} '
    """
    env_name_escaped = re.escape(env_name)

    # Build patterns from templates
    begin_pattern = LaTeXPatterns.BEGIN_ENV.format(env=env_name_escaped)
    end_pattern = LaTeXPatterns.END_ENV.format(env=env_name_escaped)

    begin_match = re.search(begin_pattern, text[start_pos:])
    if not begin_match:
        raise ValueError(f"No \\begin{{{env_name}}} found")

    begin_pos = start_pos + begin_match.start()
    content_start = start_pos + begin_match.end()

    # Count nested environments to find matching \end{env_name}
    pos = content_start
    depth = 1

    while pos < len(text) and depth > 0:
        begin_nested = re.search(begin_pattern, text[pos:])
        end_nested = re.search(end_pattern, text[pos:])

        if not end_nested:
            break

        if begin_nested and begin_nested.start() < end_nested.start():
            depth += 1
            pos += begin_nested.end()
        else:
            depth -= 1
            if depth == 0:
                content = text[content_start : pos + end_nested.start()]
                return content, begin_pos, pos + end_nested.end()
            pos += end_nested.end()

    raise ValueError(f"Unmatched \\begin{{{env_name}}}")


def split_itemize_entries(content: str, marker_pattern: str = LaTeXPatterns.ITEM_ANY) -> List[str]:
    """
    Split itemize content into individual entry strings.

    Finds all item markers and slices content between them.
    Each returned string includes the marker and its content.

    Args:
        content: LaTeX content containing multiple itemize entries
        marker_pattern: Regex pattern to match markers (use LaTeXPatterns constants)

    Returns:
        List of entry strings, each starting with its marker

    Example:
        >>> split_itemize_entries(r"\\item First\\item Second")
        ['\\\\item First', '\\\\item Second']
    """
    matches = list(re.finditer(marker_pattern, content))

    if not matches:
        return []

    entries = []
    for i, match in enumerate(matches):
        start = match.start()
        # End is either next marker start or end of content
        end = matches[i + 1].start() if i + 1 < len(matches) else len(content)

        entry = content[start:end].strip()
        if entry:
            entries.append(entry)

    return entries


def extract_itemize_entry(entry_latex: str, marker_pattern: str = LaTeXPatterns.ITEM_ANY) -> dict:
    """
    Extract marker, latex_raw and plaintext from an itemize list entry.

    Args:
        entry_latex: LaTeX string for one complete entry (marker + content)
        marker_pattern: Regex pattern with named capture group (?P<marker>...)

    Returns:
        Dict with marker (no backslash), latex_raw and plaintext

    Raises:
        ValueError: If no marker found matching the provided pattern

    Example:
        >>> extract_itemize_entry(r"\\item[--] \\textbf{Bold} text")
        {'marker': 'item[--]', 'latex_raw': '\\\\textbf{Bold} text', 'plaintext': 'Bold text'}
    """
    entry_stripped = entry_latex.strip()
    match = re.match(marker_pattern, entry_stripped)
    if not match:
        raise ValueError(
            f"No marker found matching pattern '{marker_pattern}' in entry: {entry_latex[:50]}..."
        )

    latex_raw = entry_stripped[match.end():].strip()
    return {"marker": match.group("marker"), "latex_raw": latex_raw, "plaintext": to_plaintext(latex_raw)}


def substitute_commands(
    text: str,
    renderers: Dict[str, Tuple[int, Callable[[List[str]], str]]],
    rescan: bool = True,
) -> str:
    """
    Replace every occurrence of several commands in one left-to-right pass.

    Arguments are matched with brace counting. An occurrence whose braces never
    close is left in place as literal text and scanning continues after it.

    Args:
        text: Text containing the commands
        renderers: Command name -> (number of brace arguments, render callable)
        rescan: Scan each replacement again for nested occurrences. With False,
            scanning resumes after the replacement, so generated text is never
            read back as LaTeX.

    Returns:
        Text with command occurrences replaced

    Example:
        >>> substitute_commands(r"\\a{x} \\b{y}", {"a": (1, lambda p: p[0].upper()), "b": (1, lambda p: "")})
        'X '
    """
    result = text
    search_from = 0
    # Longest names first so alternation never stops at a shorter prefix
    names = sorted(renderers, key=len, reverse=True)
    pattern = re.compile(
        LaTeXPatterns.COMMAND_NAMES.format(names="|".join(re.escape(n) for n in names)) + r"\s*(?=\{)"
    )

    while True:
        match = pattern.search(result, search_from)
        if not match:
            break

        num_params, render = renderers[match.group(1)]
        try:
            params, end_pos = read_command_arguments(result, match.end(), num_params)
        except ValueError:
            # Unmatched braces, keep this occurrence literal
            search_from = match.end()
            continue

        replacement = render(params)
        result = result[: match.start()] + replacement + result[end_pos:]
        search_from = match.start() if rescan else match.start() + len(replacement)

    return result


def substitute_command(
    text: str, command: str, num_params: int, render: Callable[[List[str]], str]
) -> str:
    """
    Replace every \\command{arg1}...{argN} occurrence with render([args]).

    Replacements are rescanned, so nested occurrences of the same command are
    handled. render must not copy an argument more than once.

    Example:
        >>> substitute_command(r"see \\href{u}{label}", "href", 2, lambda a: f"[{a[1]}]({a[0]})")
        'see [label](u)'
    """
    return substitute_commands(text, {command: (num_params, render)})


def replace_command(text: str, command: str, prefix: str = "", suffix: str = "") -> str:
    """
    Replace LaTeX command with optional prefix/suffix around content.

    Examples:
        >>> replace_command("\\\\textbf{bold}", "textbf", "**", "**")
        '**bold**'
        >>> replace_command("\\\\textbf{text \\\\texttt{nested} more}", "textbf")
        'text \\\\texttt{nested} more'
    """
    return substitute_command(text, command, 1, lambda params: prefix + params[0] + suffix)


def strip_comments(text: str) -> str:
    """
    Remove LaTeX comments (unescaped % to end of line).

    Escaped percent signs (\\%) are kept.

    Example:
        >>> strip_comments("40\\\\% faster % TODO reword\\nnext")
        '40\\\\% faster \\nnext'
    """
    return re.sub(LaTeXPatterns.COMMENT, "", text, flags=re.MULTILINE)


def to_plaintext(latex_str: str) -> str:
    """
    Strip ALL LaTeX commands from text, returning pure plaintext.

    Removes content wrappers (\\textbf{...}, \\color{...}{...}), spacing commands,
    literal grouping braces and all other backslash commands. Hyperlinks keep
    their label. Escaped specials become their characters and ~ becomes a space.

    Used for section titles and identity fields, which are displayed as text.

    Example:
        >>> to_plaintext("\\\\centering \\\\textbf{\\\\vspace{0pt} Bold text}\\\\par")
        'Bold text'
        >>> to_plaintext("\\\\color{techblue}Technical Skills")
        'Technical Skills'
        >>> to_plaintext("+1~(555)~123~4567")
        '+1 (555) 123 4567'
    """
    if not latex_str:
        return ""

    result = substitute_command(latex_str, "href", 2, lambda params: params[1])

    wrappers = ["textbf", "textit", "emph", "underline", "texttt", "textsc", "scshape", "textnormal", "url"]
    for wrapper in wrappers:
        result = replace_command(result, wrapper)

    result = re.sub(LaTeXPatterns.COLOR_WITH_TEXT, r"\1", result)
    result = re.sub(LaTeXPatterns.COLOR_STANDALONE, "", result)
    result = re.sub(LaTeXPatterns.SPACING_COMMANDS, "", result)

    # Line breaks and ties become spaces
    result = result.replace(r"\\", " ")
    result = re.sub(r"(?<!\\)~", " ", result)

    escaped_chars = [
        ("%", r"\%"),
        ("$", r"\$"),
        ("&", r"\&"),
        ("#", r"\#"),
        ("_", r"\_"),
        (" ", r"\ "),
        (" ", r"\,"),
    ]
    for replacement, escaped in escaped_chars:
        result = result.replace(escaped, replacement)

    result = re.sub(LaTeXPatterns.ANY_COMMAND_WITH_BRACES, "", result)
    result = re.sub(LaTeXPatterns.ANY_COMMAND_NO_BRACES, "", result)

    # Remove grouping braces but keep escaped ones as literal characters
    result = result.replace(r"\{", "<<<LEFTBRACE>>>").replace(r"\}", "<<<RIGHTBRACE>>>")
    result = result.replace("{", "").replace("}", "")
    result = result.replace("<<<LEFTBRACE>>>", "{").replace("<<<RIGHTBRACE>>>", "}")

    result = re.sub(r"\s+", " ", result)
    return result.strip()
