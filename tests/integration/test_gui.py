"""Integration tests driving the Streamlit wizard with AppTest."""

from pathlib import Path

import pytest
import streamlit
from streamlit.testing.v1 import AppTest

import session as session_module
from exporter import ExportError

APP_PATH = str(Path(__file__).resolve().parents[2] / "app" / "gui.py")


def _run_app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


@pytest.fixture
def app():
    at = _run_app()
    assert not at.exception
    return at


@pytest.fixture
def download_calls(monkeypatch):
    """Record the keyword arguments of every st.download_button call."""
    calls = []
    original = streamlit.download_button

    def recording(*args, **kwargs):
        calls.append(kwargs)
        return original(*args, **kwargs)

    monkeypatch.setattr(streamlit, "download_button", recording)
    return calls


def _session(at):
    return at.session_state["resume_session"]


def _titles(at):
    return [h.value for h in at.subheader]


def _go_to(at, index):
    for _ in range(index):
        at.button(key="next").click().run()


@pytest.mark.integration
def test_starts_on_personal_step(app):
    assert any("Personal Information" in t for t in _titles(app))
    assert "Preview" in _titles(app)
    assert app.button(key="previous").disabled


@pytest.mark.integration
def test_typing_updates_document(app):
    app.text_input(key="field_name").input("Ada Lovelace").run()
    app.text_input(key="field_email").input("ada@example.com").run()

    doc = _session(app).document
    assert doc.name == "Ada Lovelace"
    assert doc.email == "ada@example.com"


@pytest.mark.integration
def test_next_and_previous(app):
    app.button(key="next").click().run()
    assert any("Professional Summary" in t for t in _titles(app))

    app.button(key="previous").click().run()
    assert _session(app).wizard.current_step_index == 0


@pytest.mark.integration
def test_last_step_swaps_next_for_export(app):
    _go_to(app, 5)

    assert _session(app).wizard.is_last
    assert any("Review & Export" in t for t in _titles(app))
    assert not [b for b in app.button if b.key == "next"]
    assert not app.exception


@pytest.mark.integration
def test_experience_add_edit_and_move(app):
    _go_to(app, 2)
    app.button(key="add-experience").click().run()
    assert len(_session(app).document.experience) == 2

    # one structural change so far → widget keys carry version 1
    app.text_input(key="experience-1-1-title").input("Engineer").run()
    assert _session(app).document.experience[1].title == "Engineer"

    app.button(key="experience-1-1-up").click().run()
    doc = _session(app).document
    assert doc.experience[0].title == "Engineer"
    assert doc.experience[1].title == ""


@pytest.mark.integration
def test_remove_education_entry(app):
    _go_to(app, 3)
    app.button(key="education-0-0-remove").click().run()

    assert _session(app).document.education == ()
    assert not app.exception


@pytest.mark.integration
def test_skills_text_is_parsed(app):
    _go_to(app, 4)
    app.text_area(key="field_skills").input("Go, Rust,  TypeScript").run()

    assert _session(app).document.skills == ("Go", "Rust", "TypeScript")


@pytest.mark.integration
def test_unsaved_edit_follows_its_row_when_moved(app):
    _go_to(app, 2)
    app.button(key="add-experience").click().run()
    app.text_input(key="experience-1-0-title").input("A").run()

    # typed but not yet committed when the move button is clicked
    app.text_input(key="experience-1-1-title").input("B")
    app.button(key="experience-1-0-down").click().run()

    assert [e.title for e in _session(app).document.experience] == ["B", "A"]
    assert not app.exception


@pytest.mark.integration
def test_unsaved_edit_survives_removing_another_row(app):
    _go_to(app, 3)
    app.button(key="add-education").click().run()
    app.text_input(key="education-1-0-degree").input("BSc").run()

    app.text_input(key="education-1-1-degree").input("MSc")
    app.button(key="education-1-0-remove").click().run()

    assert [e.degree for e in _session(app).document.education] == ["MSc"]


@pytest.mark.integration
def test_unsaved_edit_kept_when_adding_a_row(app):
    _go_to(app, 2)
    app.text_input(key="experience-0-0-company").input("Acme")
    app.button(key="add-experience").click().run()

    doc = _session(app).document
    assert [e.company for e in doc.experience] == ["Acme", ""]


@pytest.mark.integration
def test_footer_export_on_every_step(download_calls):
    at = _run_app()
    for _ in range(5):
        assert [c["key"] for c in download_calls] == ["export_footer"]
        assert len(at.get("download_button")) == 1
        download_calls.clear()
        at.button(key="next").click().run()


@pytest.mark.integration
def test_review_step_offers_resume_pdf(download_calls):
    at = _run_app()
    _go_to(at, 5)
    download_calls.clear()
    at.run()

    assert sorted(c["key"] for c in download_calls) == [
        "export_footer", "export_nav", "export_review",
    ]
    for call in download_calls:
        assert call["file_name"] == "resume.pdf"
        assert call["mime"] == "application/pdf"
        assert call["data"].startswith(b"%PDF")
    assert len(at.get("download_button")) == 3


@pytest.mark.integration
def test_export_failure_shows_error_and_keeps_session(monkeypatch):
    def failing_export(preview, page_size=None):
        raise ExportError("layout exploded")

    monkeypatch.setattr(session_module, "export_pdf", failing_export)
    at = _run_app()
    at.text_input(key="field_name").input("Ada Lovelace").run()

    assert not at.exception
    assert any("layout exploded" in e.value for e in at.error)
    assert at.button(key="export_footer").disabled
    assert len(at.get("download_button")) == 0
    assert _session(at).document.name == "Ada Lovelace"
