"""
Unit tests for dialect detection.
"""

import pytest

from quill.contexts.compiling.dialect_detector import detect_dialect, has_document_class
from quill.contexts.compiling.resume_data_structures import Dialect


@pytest.mark.unit
@pytest.mark.parametrize(
    "source, expected",
    [
        (r"\documentclass[11pt,a4paper,sans]{moderncv}", Dialect.COMMERCIAL_CV),
        (r"\documentclass{article}\resumeSubheading{a}{b}{c}{d}", Dialect.MACRO_COMMAND),
        (r"\resumeItemListStart", Dialect.MACRO_COMMAND),
        (r"\resumeProjectHeading{x}{2021}", Dialect.MACRO_COMMAND),
        (r"\documentclass[11pt]{article}", Dialect.GENERIC_ARTICLE),
        ("JOHN DOE\nEXPERIENCE\nThings", Dialect.FREEFORM),
        ("", Dialect.FREEFORM),
    ],
)
def test_detect_dialect(source, expected):
    """Test each dialect's marker."""
    assert detect_dialect(source) == expected


@pytest.mark.unit
def test_commercial_cv_wins_over_macro_commands():
    """Test that the commercial-CV class outranks structural commands."""
    source = "\\documentclass{moderncv}\n\\section{X}\n\\resumeItem{stray}"

    assert detect_dialect(source) == Dialect.COMMERCIAL_CV


@pytest.mark.unit
def test_macro_commands_win_over_article_class():
    """Test that an article using resume macros is macro-command."""
    source = "\\documentclass{article}\n\\resumeItem{x}"

    assert detect_dialect(source) == Dialect.MACRO_COMMAND


@pytest.mark.unit
def test_similar_command_names_are_not_markers():
    """Test that \\resumeItemize is not \\resumeItem."""
    assert detect_dialect(r"\resumeItemize{x}") == Dialect.FREEFORM


@pytest.mark.unit
def test_document_class_name_must_match_exactly():
    """Test that a longer class name is not the article class."""
    assert not has_document_class(r"\documentclass{articlex}", "article")
    assert has_document_class(r"\documentclass [a4paper] { article }", "article")


@pytest.mark.unit
def test_dialect_values():
    """Test the string values used in logs and the CLI."""
    assert Dialect.MACRO_COMMAND.value == "macro-command"
    assert Dialect("freeform") is Dialect.FREEFORM


@pytest.mark.unit
@pytest.mark.parametrize(
    "source",
    [
        "\\name{Jane}{Doe}\n\\section{Skills}\n\\cvitem{Languages}{Go, Rust}",
        "\\section{Experience}\n\\cventry{2020}{Dev}{Co}{City}{}{}",
        r"\cvlistitem{Chess}",
        r"\name{Jane}{Doe}",
    ],
)
def test_moderncv_commands_without_document_class(source):
    """Test that a moderncv body pasted without its preamble is commercial-cv."""
    assert detect_dialect(source) == Dialect.COMMERCIAL_CV


@pytest.mark.unit
def test_article_class_wins_over_moderncv_commands():
    """Test that a declared article class outranks moderncv commands."""
    source = "\\documentclass{article}\n\\cvitem{Languages}{Go}"

    assert detect_dialect(source) == Dialect.GENERIC_ARTICLE


@pytest.mark.unit
def test_single_argument_name_is_not_a_marker():
    """Test that \\name{Jane Doe} alone stays freeform."""
    assert detect_dialect(r"\name{Jane Doe}") == Dialect.FREEFORM
