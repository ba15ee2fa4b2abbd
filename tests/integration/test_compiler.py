"""
Integration tests for the compile pipeline: source text in, HTML fragment out.
"""

import time

import pytest

from quill.contexts.compiling.compiler import CompileResult, compile_latex
from quill.contexts.compiling.resume_data_structures import Dialect
from quill.contexts.rendering.renderer import render_placeholder
from quill.contexts.templating import list_templates

UNTERMINATED_BULLET = "\n".join([
    r"\documentclass{article}",
    r"\begin{document}",
    r"\section{Experience}",
    r"\resumeSubheading{Dev}{2020}{Co}{City}",
    r"\resumeItemListStart",
    r"\resumeItem{Built \textbf{things}",
    r"\resumeItemListEnd",
    r"\end{document}",
])

MODERNCV_SOURCE = "\n".join([
    r"\documentclass[11pt]{moderncv}",
    r"\name{Jane}{Doe}",
    r"\email{jane@example.com}",
    r"\begin{document}",
    r"\section{Experience}",
    r"\cventry{2020--Present}{Engineer}{Acme}{Remote}{}{\begin{itemize}\item Shipped it\end{itemize}}",
    r"\section{Education}",
    r"\cventry{2016--2020}{BSc}{University}{City}{}{}",
    r"\section{Skills}",
    r"\cvitem{Languages}{Go}",
    r"\resumeItem{stray}",
    r"\end{document}",
])

EXPECTED_GALLERY_DIALECTS = {
    "moderncv-banking": Dialect.COMMERCIAL_CV,
    "moderncv-classic": Dialect.COMMERCIAL_CV,
    "academic-cv": Dialect.GENERIC_ARTICLE,
    "tech-resume": Dialect.MACRO_COMMAND,
    "classic-resume": Dialect.GENERIC_ARTICLE,
    "minimal-resume": Dialect.GENERIC_ARTICLE,
}


@pytest.mark.integration
class TestEmptyInput:
    """Blank source renders the prompt, not an error."""

    @pytest.mark.parametrize("source", ["", "   \n\t  "])
    def test_placeholder(self, source):
        result = compile_latex(source)

        assert result.error is None
        assert result.html == render_placeholder()
        assert "Start typing your LaTeX code..." in result.html
        assert result.dialect is None


@pytest.mark.integration
class TestErrorBoundary:
    """Parsing failures become error results."""

    def test_unterminated_brace_in_bullet(self):
        result = compile_latex(UNTERMINATED_BULLET)

        assert result.error is not None
        assert "Unterminated argument" in result.error
        assert "LaTeX Parsing Error" in result.html
        assert not result.success

    @pytest.mark.parametrize(
        "source",
        [
            "{",
            "}",
            "\\",
            r"\section{",
            r"\cventry{",
            r"\documentclass{moderncv}\section{A}\cventry{",
            r"\documentclass{article}\begin{document}\textbf{Experience}\begin{itemize}\item x",
            "%%%",
            "\x00\x01",
            "日本語 ÜBER",
            r"$$\frac{a}{b}$$",
        ],
    )
    def test_never_raises(self, source):
        result = compile_latex(source)

        assert isinstance(result, CompileResult)
        assert isinstance(result.html, str)
        assert result.html


@pytest.mark.integration
class TestDocumentOutput:
    """End-to-end rendering properties."""

    def test_commercial_cv_document(self):
        result = compile_latex(MODERNCV_SOURCE)

        assert result.error is None
        assert result.dialect == Dialect.COMMERCIAL_CV
        assert '<h1 class="name">Jane Doe</h1>' in result.html
        assert "<li>Shipped it</li>" in result.html
        assert '<span class="label">Languages:</span> Go' in result.html

    def test_section_order_preserved(self):
        html = compile_latex(MODERNCV_SOURCE).html
        positions = [html.index(f'<h2 class="section-title">{title}</h2>') for title in ("Experience", "Education", "Skills")]

        assert positions == sorted(positions)

    def test_idempotent(self):
        assert compile_latex(MODERNCV_SOURCE).html == compile_latex(MODERNCV_SOURCE).html

    def test_empty_identity_renders_no_header(self):
        result = compile_latex("EXPERIENCE\nbuilt things")

        assert result.dialect == Dialect.FREEFORM
        assert 'class="header"' not in result.html
        assert '<h2 class="section-title">EXPERIENCE</h2>' in result.html

    def test_no_sections_renders_no_content(self):
        result = compile_latex(r"\resumeItem{orphan}")

        assert result.error is None
        assert result.dialect == Dialect.MACRO_COMMAND
        assert "No content" in result.html

    def test_section_without_entries(self):
        source = r"\documentclass{moderncv}\begin{document}\section{Empty}\section{Skills}\cvitem{A}{B}\end{document}"
        html = compile_latex(source).html

        assert '<h2 class="section-title">Empty</h2>' in html

    def test_deep_nesting_in_bullet(self):
        source = "\n".join([
            r"\section{Projects}",
            r"\resumeProjectHeading{Quill}{2021}",
            r"\resumeItemListStart",
            r"\resumeItem{Wrote \textbf{a \textit{very \emph{nested}} parser}}",
            r"\resumeItemListEnd",
        ])
        result = compile_latex(source)

        assert result.error is None
        assert "<li>Wrote <strong>a <em>very <em>nested</em></em> parser</strong></li>" in result.html

    def test_raw_html_is_escaped(self):
        result = compile_latex("<script>alert(1)</script>")

        assert "<script>" not in result.html
        assert "&lt;script&gt;" in result.html

    def test_unsafe_commands_stripped(self):
        source = r"\documentclass{article}\begin{document}\section*{Experience} did \input{/etc/passwd} work\end{document}"
        result = compile_latex(source)

        assert result.error is None
        assert "passwd" not in result.html
        assert "did" in result.html


@pytest.mark.integration
class TestCommercialCvWithoutPreamble:
    """moderncv body text with no \\documentclass line."""

    SOURCE = "\\name{Jane}{Doe}\n\\section{Skills}\n\\cvitem{Languages}{Go, Rust}"

    def test_compiles_as_commercial_cv(self):
        result = compile_latex(self.SOURCE)

        assert result.error is None
        assert result.dialect == Dialect.COMMERCIAL_CV
        assert '<h1 class="name">Jane Doe</h1>' in result.html
        assert result.html.count('class="section-title"') == 1
        assert '<h2 class="section-title">Skills</h2>' in result.html
        assert '<span class="label">Languages:</span> Go, Rust' in result.html
        assert "cvitem" not in result.html


@pytest.mark.integration
class TestLinkSafety:
    """Links in compiled output."""

    def test_nested_url_compiles_quickly(self):
        source = "URL\n" + "\\url{" * 40 + "x" + "}" * 40
        start = time.perf_counter()
        result = compile_latex(source)

        assert time.perf_counter() - start < 2
        assert result.error is None
        assert "<a " not in result.html
        assert len(result.html) < 2 * len(compile_latex("URL\nx").html)

    def test_link_in_link_target_is_not_markup(self):
        result = compile_latex(r"\href{\href{x onmouseover=alert(1) y}{b}}{c}")

        assert "onmouseover" not in result.html
        assert '<p class="simple-text">c</p>' in result.html


@pytest.mark.integration
def test_status_figures():
    source = "JOHN DOE\nsoftware engineer"
    result = compile_latex(source)

    assert result.word_count == 4
    assert result.char_count == len(source)
    assert result.last_compiled_at.tzinfo is not None


@pytest.mark.integration
@pytest.mark.parametrize("template", list_templates(), ids=lambda template: template.id)
def test_gallery_templates_compile(template):
    """Every bundled template compiles cleanly in its intended dialect."""
    result = compile_latex(template.source_text)

    assert result.error is None
    assert result.dialect == EXPECTED_GALLERY_DIALECTS[template.id]
    assert 'class="section-title"' in result.html
    assert 'class="header"' in result.html
