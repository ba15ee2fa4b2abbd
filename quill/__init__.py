"""
QUILL - Quick Unified Interpreter for LaTeX Layouts

Turns typeset resume source text, written in any of several incompatible
LaTeX dialects, into a self-contained styled HTML preview.

Architecture:
- Compiling Context: Dialect detection, identity extraction, segmentation, entry parsing
- Rendering Context: HTML generation from the structured document model
- Templating Context: Static gallery of starter resume sources
"""

__version__ = "0.1.0"
