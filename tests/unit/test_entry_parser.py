"""
Unit tests for per-dialect entry parsing.
"""

import pytest

from quill.contexts.compiling.entry_parser import extract_bullets, parse_entries
from quill.contexts.compiling.exceptions import LatexParsingError
from quill.contexts.compiling.resume_data_structures import (
    Dialect,
    FreeformEntry,
    LabeledEntry,
    SubheadingEntry,
)


@pytest.mark.unit
class TestMacroCommandEntries:
    """resumeSubheading / resumeItem sections."""

    EXPERIENCE = r"""
\resumeSubHeadingListStart
  \resumeSubheading{Software Engineer}{2020 -- Present}{Acme}{Remote}
  \resumeItemListStart
    \resumeItem{Built \textbf{fast} things}
    \resumeItem{Led a team}
  \resumeItemListEnd
\resumeSubHeadingListEnd
"""

    def test_subheading_with_bullets(self):
        entries = parse_entries(self.EXPERIENCE, Dialect.MACRO_COMMAND)

        assert entries == [
            SubheadingEntry(
                title="Software Engineer",
                date_range="2020 -- Present",
                subtitle="Acme",
                location="Remote",
                bullets=["Built <strong>fast</strong> things", "Led a team"],
            )
        ]

    def test_arguments_on_separate_lines(self):
        body = "\\resumeSubheading\n  {State University}{2016 -- 2020}\n  {BS Computer Science}{Austin, TX}"
        entry = parse_entries(body, Dialect.MACRO_COMMAND)[0]

        assert (entry.title, entry.date_range, entry.subtitle, entry.location) == (
            "State University",
            "2016 -- 2020",
            "BS Computer Science",
            "Austin, TX",
        )

    def test_deeply_nested_bullet(self):
        body = r"\resumeSubheading{T}{D}{S}{L}\resumeItemListStart\resumeItem{Used \textbf{\emph{deep {nest}}} here}\resumeItemListEnd"
        entry = parse_entries(body, Dialect.MACRO_COMMAND)[0]

        assert entry.bullets == ["Used <strong><em>deep {nest}</em></strong> here"]

    def test_standalone_items_are_labeled(self):
        body = r"\resumeItem{\textbf{Languages:} Go, Python}\resumeItem{\textbf{Tools}: Docker}\resumeItem{Plain text}"

        assert parse_entries(body, Dialect.MACRO_COMMAND) == [
            LabeledEntry(label="Languages", body="Go, Python"),
            LabeledEntry(label="Tools", body="Docker"),
            LabeledEntry(body="Plain text"),
        ]

    def test_item_after_list_end_is_not_a_bullet(self):
        body = self.EXPERIENCE + r"\resumeItem{\textbf{Awards:} none}"
        entries = parse_entries(body, Dialect.MACRO_COMMAND)

        assert len(entries) == 2
        assert len(entries[0].bullets) == 2
        assert entries[1] == LabeledEntry(label="Awards", body="none")

    def test_project_heading(self):
        body = r"\resumeProjectHeading{\textbf{Quill} $|$ \emph{Python}}{2021}\resumeItemListStart\resumeItem{Editor}\resumeItemListEnd"
        entry = parse_entries(body, Dialect.MACRO_COMMAND)[0]

        assert entry.title == "<strong>Quill</strong> | <em>Python</em>"
        assert entry.date_range == "2021"
        assert entry.subtitle == ""
        assert entry.bullets == ["Editor"]

    def test_sub_item(self):
        assert parse_entries(r"\resumeSubItem{Award}{Best paper}", Dialect.MACRO_COMMAND) == [
            LabeledEntry(label="Award", body="Best paper"),
        ]

    def test_order_preserved(self):
        body = r"\resumeSubheading{First}{}{}{}\resumeSubheading{Second}{}{}{}\resumeSubheading{Third}{}{}{}"
        titles = [entry.title for entry in parse_entries(body, Dialect.MACRO_COMMAND)]

        assert titles == ["First", "Second", "Third"]

    def test_unterminated_bullet_raises(self):
        with pytest.raises(LatexParsingError) as exc_info:
            parse_entries(r"\resumeItemListStart\resumeItem{Built \textbf{things}", Dialect.MACRO_COMMAND)

        assert exc_info.value.command == "resumeItem"

    def test_body_without_structural_commands(self):
        assert parse_entries("Just some text", Dialect.MACRO_COMMAND) == [FreeformEntry("Just some text")]

    def test_empty_body(self):
        assert parse_entries("", Dialect.MACRO_COMMAND) == []


@pytest.mark.unit
class TestCommercialCvEntries:
    """cventry / cvitem sections."""

    def test_cventry_with_itemize(self):
        body = r"""
\cventry{2020--Present}{Senior Developer}{Tech Corp}{San Francisco, CA}{}{
\begin{itemize}
\item Developed apps
\item Cut latency by 40\%
\end{itemize}}
"""
        assert parse_entries(body, Dialect.COMMERCIAL_CV) == [
            SubheadingEntry(
                title="Senior Developer",
                date_range="2020--Present",
                subtitle="Tech Corp",
                location="San Francisco, CA",
                bullets=["Developed apps", "Cut latency by 40%"],
            )
        ]

    def test_cventry_prose_becomes_description(self):
        body = r"\cventry{2023}{AWS Certified}{Amazon}{}{}{Professional level certification}"
        entry = parse_entries(body, Dialect.COMMERCIAL_CV)[0]

        assert entry.bullets == []
        assert entry.description == "Professional level certification"

    def test_cventry_prose_and_bullets(self):
        body = r"\cventry{2019}{Manager}{Co}{City}{}{Runs things. \begin{itemize}\item A\end{itemize}}"
        entry = parse_entries(body, Dialect.COMMERCIAL_CV)[0]

        assert entry.description == "Runs things."
        assert entry.bullets == ["A"]

    def test_cvitem(self):
        body = r"\cvitem{Languages}{Python, Go}\cvitem{}{Summary text}"

        assert parse_entries(body, Dialect.COMMERCIAL_CV) == [
            LabeledEntry(label="Languages", body="Python, Go"),
            LabeledEntry(body="Summary text"),
        ]

    def test_cvitem_optional_spacing_argument(self):
        assert parse_entries(r"\cvitem[0.5em]{Label}{Body}", Dialect.COMMERCIAL_CV) == [
            LabeledEntry(label="Label", body="Body"),
        ]

    def test_cvitem_variants(self):
        body = "\n".join([
            r"\cvitemwithcomment{Lean}{Green Belt}{2018}",
            r"\cvdoubleitem{Planning}{Forecasting}{Tools}{SAP}",
            r"\cvlistitem{English}",
        ])

        assert parse_entries(body, Dialect.COMMERCIAL_CV) == [
            LabeledEntry(label="Lean", body="Green Belt <em>2018</em>"),
            LabeledEntry(label="Planning", body="Forecasting"),
            LabeledEntry(label="Tools", body="SAP"),
            LabeledEntry(body="English"),
        ]

    def test_unterminated_entry_raises(self):
        with pytest.raises(LatexParsingError):
            parse_entries(r"\cventry{2020}{Dev}{Co}{City}{}{\begin{itemize}\item x", Dialect.COMMERCIAL_CV)


@pytest.mark.unit
class TestArticleEntries:
    """Paragraph entries."""

    def test_paragraphs(self):
        body = "\\\\\nFirst line\nstill first\n\n\\vspace{1em}\n\nSecond \\textbf{bold}\n"

        assert parse_entries(body, Dialect.GENERIC_ARTICLE) == [
            FreeformEntry("First line\nstill first"),
            FreeformEntry("Second <strong>bold</strong>"),
        ]

    def test_vspace_separates_paragraphs(self):
        body = "One\\vspace{0.5em}Two"

        assert parse_entries(body, Dialect.GENERIC_ARTICLE) == [FreeformEntry("One"), FreeformEntry("Two")]

    def test_list_environment(self):
        body = "Intro\n\\begin{itemize}\n\\item A\n\\item B\n\\end{itemize}"

        assert parse_entries(body, Dialect.GENERIC_ARTICLE) == [
            FreeformEntry("Intro<ul><li>A</li><li>B</li></ul>"),
        ]


@pytest.mark.unit
class TestFreeformEntries:
    """Line entries."""

    def test_lines_become_entries(self):
        body = "Line one\n\n% comment\n\\usepackage{x}\n  Line two  "

        assert parse_entries(body, Dialect.FREEFORM) == [FreeformEntry("Line one"), FreeformEntry("Line two")]


@pytest.mark.unit
def test_extract_bullets_unclosed_list_runs_to_end():
    bullets, prose = extract_bullets(r"Intro \begin{enumerate}\item A\item B")

    assert bullets == ["A", "B"]
    assert prose == "Intro"
