"""Integration tests: preview → real PDF, read back with pdfplumber."""

import io

import pdfplumber
import pytest

import exporter
from exporter import ExportError, export_pdf
from preview import build_preview
from schema_resume import ExperienceEntry, ResumeDocument, blank_resume


def _pages_text(pdf_bytes):
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        return [p.extract_text() or "" for p in pdf.pages]


@pytest.mark.integration
def test_export_blank_resume_is_one_page_with_placeholders():
    pdf = export_pdf(build_preview(blank_resume()))

    assert pdf.startswith(b"%PDF")
    pages = _pages_text(pdf)
    assert len(pages) == 1
    text = pages[0]
    for expected in ("Your Name", "Professional Summary", "Work Experience",
                     "Job Title", "Education", "Degree in Field of Study",
                     "List your key skills here.", "Page 1"):
        assert expected in text


@pytest.mark.integration
def test_export_paginates_long_resume():
    jobs = tuple(
        ExperienceEntry(title=f"Role {i}", company="Acme", description="Shipped things. " * 20)
        for i in range(30)
    )
    pages = _pages_text(export_pdf(build_preview(ResumeDocument(experience=jobs))))

    assert len(pages) > 1
    assert "Page 2" in pages[1]
    joined = "\n".join(pages)
    assert "Role 0" in joined and "Role 29" in joined


@pytest.mark.integration
def test_export_keeps_markup_characters_literal():
    doc = ResumeDocument(name="Ada <Lovelace> & Co")
    text = _pages_text(export_pdf(build_preview(doc)))[0]
    assert "Ada <Lovelace> & Co" in text


@pytest.mark.integration
def test_letter_page_size():
    pdf = export_pdf(build_preview(blank_resume()), page_size="letter")
    with pdfplumber.open(io.BytesIO(pdf)) as doc:
        assert round(doc.pages[0].width) == 612
        assert round(doc.pages[0].height) == 792


@pytest.mark.integration
def test_unknown_page_size_falls_back_to_a4():
    pdf = export_pdf(build_preview(blank_resume()), page_size="tabloid")
    with pdfplumber.open(io.BytesIO(pdf)) as doc:
        assert round(doc.pages[0].width) == 595


@pytest.mark.integration
def test_build_failure_is_wrapped(monkeypatch):
    def boom(self, *args, **kwargs):
        raise ValueError("layout exploded")

    monkeypatch.setattr(exporter.SimpleDocTemplate, "build", boom)
    with pytest.raises(ExportError, match="layout exploded") as info:
        export_pdf(build_preview(blank_resume()))
    assert isinstance(info.value.__cause__, ValueError)
