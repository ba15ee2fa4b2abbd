"""
Shared utilities for QUILL.

Common functionality used across contexts:
- Brace and delimiter scanning
- LaTeX helpers
- Logging setup
- Timestamps
"""

from quill.utils.timestamp import format_timestamp, now

__all__ = ["format_timestamp", "now"]
