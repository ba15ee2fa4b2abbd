"""Custom exceptions for the compiling context."""

from typing import Optional

from quill.utils.text_processing import truncate_display


class LatexParsingError(Exception):
    """
    Exception raised when a structural command cannot be parsed.

    Attributes:
        message: Error description
        command: Name of the command being parsed (e.g., 'resumeItem')
        latex_snippet: The LaTeX content that failed to parse
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        latex_snippet: Optional[str] = None,
    ):
        self.message = message
        self.command = command
        self.latex_snippet = latex_snippet

        parts = [message]

        if command:
            parts.append(f"Command: \\{command}")

        if latex_snippet:
            parts.append(f"Near: {truncate_display(latex_snippet, 80)}")

        super().__init__("\n".join(parts))
