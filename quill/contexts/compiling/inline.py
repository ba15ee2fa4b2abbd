"""
Inline Markup Transformation

Converts the inline formatting commands embedded in free text into inline
HTML. The source text is HTML-escaped first, so only markup produced here
reaches the preview.

Rules:
- \\textbf{x}                -> <strong>x</strong>
- \\textit{x}, \\emph{x}      -> <em>x</em>
- \\href{url}{label}         -> <a href="url">label</a>
- \\url{url}                 -> <a href="url">url</a>
- \\\\ (line break)           -> <br>
- \\% \\$ \\& \\# \\_ \\{ \\}    -> the literal character
- $|$                      -> |

Links are resolved in a single pass that never reads generated anchors back
as LaTeX. A link target is reduced to plain text with whitespace and control
characters removed; only http(s) and mailto targets become anchors, anything
else keeps just its label. Any other command is left as literal text rather
than stripped.
"""

import re
from typing import List, Optional

from markupsafe import Markup, escape

from quill.contexts.compiling.resume_data_structures import RichText
from quill.utils.latex_parsing_tools import replace_command, substitute_commands, to_plaintext

LINE_BREAK_SENTINEL = "\x00br\x00"

# (escaped form after HTML escaping, replacement)
ESCAPED_SPECIALS = [
    ("$|$", "|"),
    (r"\%", "%"),
    (r"\$", "$"),
    (r"\&amp;", "&amp;"),
    (r"\#", "#"),
    (r"\_", "_"),
    (r"\{", "{"),
    (r"\}", "}"),
]

SAFE_URL_SCHEMES = ("http://", "https://", "mailto:")

# Whitespace, control characters and leftover backslashes never survive in a link target
URL_NOISE = r"[\s\x00-\x1f\x7f\\]"

FORMATTING = [
    ("textbf", "<strong>", "</strong>"),
    ("textit", "<em>", "</em>"),
    ("emph", "<em>", "</em>"),
]


def link_target(raw: str) -> Optional[str]:
    """
    Reduce an (already escaped) url argument to a safe link target.

    Returns:
        The cleaned target, or None when its scheme is not allowed

    Example:
        >>> link_target("java\\tscript:alert(1)") is None
        True
    """
    url = re.sub(URL_NOISE, "", to_plaintext(raw))
    if url.lower().startswith(SAFE_URL_SCHEMES):
        return url
    return None


def _anchor(url: Optional[str], label: str) -> str:
    if url is None:
        return label
    return f'<a href="{url}" target="_blank" rel="noopener">{label}</a>'


def _render_href(params: List[str]) -> str:
    return _anchor(link_target(params[0]), resolve_links(params[1]))


def _render_url(params: List[str]) -> str:
    return _anchor(link_target(params[0]), to_plaintext(params[0]))


def resolve_links(text: str) -> str:
    """Resolve \\href and \\url in escaped text; nested links inside a label are resolved first."""
    return substitute_commands(
        text, {"href": (2, _render_href), "url": (1, _render_url)}, rescan=False
    )


def resolve_inline(text: str) -> RichText:
    """
    Resolve inline formatting commands to HTML.

    Args:
        text: LaTeX text run

    Returns:
        RichText (Markup) safe to embed in the rendered document

    Example:
        >>> resolve_inline(r"\\textbf{Go} and \\href{https://go.dev}{site}")
        Markup('<strong>Go</strong> and <a href="https://go.dev" target="_blank" rel="noopener">site</a>')
        >>> resolve_inline(r"\\faStar{} 40\\% <b>")
        Markup('\\\\faStar{} 40% &lt;b&gt;')
    """
    if not text:
        return Markup("")

    # \\ and \\[4pt] are line breaks; protect them before command scanning
    result = re.sub(r"\\\\(?:\[[^\]]*\])?", LINE_BREAK_SENTINEL, text)

    result = str(escape(result))

    result = resolve_links(result)
    for command, prefix, suffix in FORMATTING:
        result = replace_command(result, command, prefix, suffix)

    for escaped, replacement in ESCAPED_SPECIALS:
        result = result.replace(escaped, replacement)

    result = result.replace(LINE_BREAK_SENTINEL, "<br>")
    return Markup(result.strip())
