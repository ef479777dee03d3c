"""Pytest configuration and shared fixtures for the wordown test suite."""

import os
from pathlib import Path

import pytest
from docx import Document as DocxDocument
from docx.enum.style import WD_STYLE_TYPE
from hypothesis import Phase, Verbosity, settings

# Hypothesis profiles; select one with HYPOTHESIS_PROFILE
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

TEMPLATE_PARAGRAPH_STYLES = ["body1", "code", "nList1", "nList2", "numList1", "Error"]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "docx: Tests that render DOCX output with python-docx")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests generated with Hypothesis")


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    """Provide a DOCX template with wordown styles and a placeholder paragraph.

    The body holds three paragraphs: ``Before``, ``{{paragraphReplace}}`` and
    ``After``.

    """
    document = DocxDocument()
    for name in TEMPLATE_PARAGRAPH_STYLES:
        document.styles.add_style(name, WD_STYLE_TYPE.PARAGRAPH)
    if "Hyperlink" not in [style.name for style in document.styles]:
        document.styles.add_style("Hyperlink", WD_STYLE_TYPE.CHARACTER)

    document.add_paragraph("Before")
    document.add_paragraph("{{paragraphReplace}}")
    document.add_paragraph("After")

    path = tmp_path / "template.docx"
    document.save(str(path))
    return path


@pytest.fixture
def sample_markup() -> str:
    """Provide markup exercising every command tag."""
    return "\n".join(
        [
            "section\tHeading1\tIntroduction\tintro",
            "newLine",
            "text\tSee ",
            "link\t#intro\tthe introduction",
            "newLine",
            "NormalList\t1",
            "text\tFirst bullet",
            "newLine",
            "OderList\t2",
            "text\tNested step",
            "newLine",
            "code\tprint('hi')",
            "newLine",
            "link\thttps://example.com\tExample",
            "newLine",
        ]
    )
