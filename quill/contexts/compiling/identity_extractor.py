"""
Personal-Info Extraction

Runs an ordered battery of pattern rules against the whole source to
populate an IdentityRecord. Rules are independent per field and layered
from most dialect-specific to most generic; the first matching rule wins
and later rules for that field are never consulted.
"""

import re
from typing import Optional, Sequence

from quill.contexts.compiling.latex_patterns import IdentityRules
from quill.contexts.compiling.logger import _log_debug
from quill.contexts.compiling.resume_data_structures import IdentityRecord
from quill.utils.latex_parsing_tools import strip_comments, to_plaintext

# Field name -> ordered rules
FIELD_RULES = {
    "name": IdentityRules.NAME,
    "email": IdentityRules.EMAIL,
    "phone": IdentityRules.PHONE,
    "linkedin_handle": IdentityRules.LINKEDIN,
    "github_handle": IdentityRules.GITHUB,
    "homepage": IdentityRules.HOMEPAGE,
}


def first_match(source: str, rules: Sequence[str]) -> Optional[str]:
    """
    Apply rules in order and return the value from the first one that matches.

    Multi-group matches (e.g. \\name{First}{Last}) are joined with a space.
    A rule whose match cleans down to an empty string still wins: rules are
    first-match, not best-match.

    Returns:
        Cleaned value, or None when no rule matches or the winner is empty
    """
    for rule in rules:
        match = re.search(rule, source)
        if match:
            raw = " ".join(group for group in match.groups() if group)
            value = to_plaintext(raw)
            return value or None
    return None


def extract_identity(source: str) -> IdentityRecord:
    """
    Extract a best-effort identity record from resume source.

    Fields are independent: a failed name match never blocks email extraction.
    Comments are stripped first, so commented-out contact lines never win.
    Never raises; unmatched fields stay None.

    Args:
        source: Raw resume source (any dialect)

    Returns:
        IdentityRecord

    Example:
        >>> extract_identity(r"\\name{Jane}{Doe}\\email{jane@example.com}")
        IdentityRecord(name='Jane Doe', email='jane@example.com', phone=None, ...)
    """
    text = strip_comments(source)
    values = {field_name: first_match(text, rules) for field_name, rules in FIELD_RULES.items()}
    found = [field_name for field_name, value in values.items() if value is not None]
    _log_debug(f"Identity fields found: {', '.join(found) if found else 'none'}")
    return IdentityRecord(**values)
