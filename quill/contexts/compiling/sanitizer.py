"""
Source sanitization.

Strips shell-escape and file-access constructs (\\write18, \\input, verbatim
blocks, catcode changes) before the source reaches the parsers, so they can
never surface in the rendered preview. Never raises.
"""

import re

from quill.contexts.compiling.latex_patterns import UnsafePatterns


def strip_unsafe_commands(source: str) -> str:
    """
    Remove unsafe LaTeX constructs from source.

    Example:
        >>> strip_unsafe_commands(r"a \\input{/etc/passwd} b")
        'a  b'
    """
    result = re.sub(UnsafePatterns.VERBATIM, "", source, flags=re.DOTALL)
    # Shell escape first, so \immediate does not survive the plain \write rule
    for pattern in (
        UnsafePatterns.SHELL_ESCAPE,
        UnsafePatterns.WRITE,
        UnsafePatterns.FILE_ACCESS,
        UnsafePatterns.CATCODE,
    ):
        result = re.sub(pattern, "", result)
    return result
