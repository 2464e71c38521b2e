import streamlit as st

from config import APP_TITLE, EXPORT_FILENAME, PREVIEW_HEIGHT, configure_logging

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title=APP_TITLE)

import logging
import streamlit.components.v1 as components

from exporter import ExportError
from session import ResumeSession
from steps import STEP_COUNT

configure_logging()
log = logging.getLogger("gui")

# Initialize session state variables
if "resume_session" not in st.session_state:
    st.session_state.resume_session = ResumeSession()

# (field name, label, multi-line?) per list section
ENTRY_FIELDS = {
    "experience": [
        ("title", "Job Title", False),
        ("company", "Company", False),
        ("start_date", "Start Date", False),
        ("end_date", "End Date", False),
        ("description", "Job Description", True),
    ],
    "education": [
        ("degree", "Degree", False),
        ("field", "Field of Study", False),
        ("school", "School Name", False),
        ("graduation_year", "Graduation Year", False),
    ],
}
ENTRY_NOUN = {"experience": "Experience", "education": "Education"}


def _session() -> ResumeSession:
    return st.session_state.resume_session


# --- CALLBACKS (run before the next rerun) ---
def _on_field(name: str) -> None:
    _session().set_field(name, st.session_state[f"field_{name}"])


def _on_skills() -> None:
    _session().set_skills_text(st.session_state["field_skills"])


def _entry_key(section: str, version: int, index: int, name: str) -> str:
    return f"{section}-{version}-{index}-{name}"


def _commit_pending(section: str, version: int) -> None:
    """Write every row's widget value to the document before rows move.

    Button callbacks can run before the text callbacks of the same rerun, so
    edits still sitting in the widgets would otherwise land on shifted rows.
    """
    session = _session()
    if version != session.layout_version:
        return
    for i in range(len(getattr(session.document, section))):
        for name, _, _ in ENTRY_FIELDS[section]:
            key = _entry_key(section, version, i, name)
            if key in st.session_state:
                session.set_entry_field(section, i, name, st.session_state[key])


def _on_entry_field(section: str, version: int, index: int, name: str) -> None:
    session = _session()
    # rows were added, removed or moved since this widget was drawn
    if version != session.layout_version:
        return
    key = _entry_key(section, version, index, name)
    session.set_entry_field(section, index, name, st.session_state[key])


def _on_add(section: str, version: int) -> None:
    _commit_pending(section, version)
    _session().add_entry(section)


def _on_remove(section: str, version: int, index: int) -> None:
    _commit_pending(section, version)
    _session().remove_entry(section, index)


def _on_move(section: str, version: int, source: int, destination: int) -> None:
    _commit_pending(section, version)
    _session().move_entry(section, source, destination)


def _on_next() -> None:
    _session().next_step()


def _on_previous() -> None:
    _session().previous_step()


# --- STEP FORMS ---
def _personal_step(session: ResumeSession) -> None:
    doc = session.document
    for name, label in (("name", "Full Name"), ("email", "Email"), ("phone", "Phone")):
        st.text_input(label, value=getattr(doc, name), key=f"field_{name}",
                      on_change=_on_field, args=(name,))


def _summary_step(session: ResumeSession) -> None:
    st.text_area(
        "Professional Summary",
        value=session.document.summary,
        key="field_summary",
        placeholder="Write a brief summary of your professional background",
        on_change=_on_field,
        args=("summary",),
    )


def _entries_step(session: ResumeSession, section: str) -> None:
    items = getattr(session.document, section)
    version = session.layout_version
    if not items:
        st.info(f"No {ENTRY_NOUN[section].lower()} entries yet.")
    for i, entry in enumerate(items):
        with st.container(border=True):
            for name, label, multiline in ENTRY_FIELDS[section]:
                widget = st.text_area if multiline else st.text_input
                widget(label, value=getattr(entry, name),
                       key=_entry_key(section, version, i, name),
                       on_change=_on_entry_field, args=(section, version, i, name))
            col_up, col_down, col_remove = st.columns(3)
            with col_up:
                st.button("⬆️ Move up", key=_entry_key(section, version, i, "up"),
                          disabled=i == 0, width="stretch",
                          on_click=_on_move, args=(section, version, i, i - 1))
            with col_down:
                st.button("⬇️ Move down", key=_entry_key(section, version, i, "down"),
                          disabled=i == len(items) - 1, width="stretch",
                          on_click=_on_move, args=(section, version, i, i + 1))
            with col_remove:
                st.button("🗑️ Remove", key=_entry_key(section, version, i, "remove"),
                          type="secondary", width="stretch",
                          on_click=_on_remove, args=(section, version, i))
    st.button(f"➕ Add {ENTRY_NOUN[section]}", key=f"add-{section}",
              on_click=_on_add, args=(section, version))


def _skills_step(session: ResumeSession) -> None:
    st.text_area(
        "Skills",
        value=session.skills_text,
        key="field_skills",
        placeholder="Enter your skills, separated by commas",
        on_change=_on_skills,
    )


def _review_step(session: ResumeSession, pdf: bytes | None) -> None:
    st.markdown(
        "Great job! You've completed all steps. Review your résumé on the right "
        "and click **Export as PDF** when you're ready to download."
    )
    _export_button(pdf, key="export_review")


STEP_FORMS = {
    "personal": _personal_step,
    "summary": _summary_step,
    "experience": lambda s: _entries_step(s, "experience"),
    "education": lambda s: _entries_step(s, "education"),
    "skills": _skills_step,
}


# --- EXPORT ---
def _build_pdf(session: ResumeSession) -> bytes | None:
    try:
        return session.export()
    except ExportError as e:
        log.exception("PDF export failed")
        st.error(f"An unexpected error occurred while exporting your résumé: {e}")
        return None


def _export_button(pdf: bytes | None, key: str) -> None:
    if pdf is None:
        st.button("📥 Export as PDF", key=key, disabled=True, width="stretch")
        return
    st.download_button(
        label="📥 Export as PDF",
        data=pdf,
        file_name=EXPORT_FILENAME,
        mime="application/pdf",
        key=key,
        width="stretch",
    )


# --- PAGE ---
session = _session()
wizard = session.wizard

st.title(f"📄 {APP_TITLE}")
st.markdown("Build a professional résumé step by step")

pdf_bytes = _build_pdf(session)

col_form, col_preview = st.columns(2, gap="large")

with col_form:
    st.progress(wizard.progress, text=f"Step {wizard.current_step_index + 1} of {STEP_COUNT}")
    st.subheader(f"{wizard.step.icon} {wizard.step.title}")

    if wizard.is_last:
        _review_step(session, pdf_bytes)
    else:
        STEP_FORMS[wizard.step.key](session)

    col_prev, col_next = st.columns(2)
    with col_prev:
        st.button("◀ Previous", key="previous", disabled=wizard.is_first,
                  width="stretch", on_click=_on_previous)
    with col_next:
        if wizard.is_last:
            _export_button(pdf_bytes, key="export_nav")
        else:
            st.button("Next ▶", key="next", type="primary",
                      width="stretch", on_click=_on_next)

with col_preview:
    st.subheader("Preview")
    components.html(session.preview_html(), height=PREVIEW_HEIGHT, scrolling=True)

st.divider()
col_copy, col_export = st.columns([3, 1])
with col_copy:
    st.caption(f"© {APP_TITLE}. Build your future.")
with col_export:
    _export_button(pdf_bytes, key="export_footer")
