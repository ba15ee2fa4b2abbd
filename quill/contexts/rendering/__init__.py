"""
Rendering Context

Responsibilities:
- Renders a parsed ResumeDocument and IdentityRecord into a self-contained HTML fragment
- Renders the placeholder prompt and the error fragment
- Ships the fixed stylesheet (screen and print rules) with every fragment

Owns: HTML templates, stylesheet, template loading
Never: Parses LaTeX or decides document structure
"""

from quill.contexts.rendering.renderer import render_document, render_error, render_placeholder

__all__ = [
    "render_document",
    "render_error",
    "render_placeholder",
]
