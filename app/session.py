"""
The single per-browser-session store.

ResumeSession owns the current ResumeDocument and WizardState.  Every
operation computes a new document with the pure helpers and swaps it in
whole, so readers (preview, export) always see a finished state.
`layout_version` changes whenever entries are added, removed or moved; the
UI folds it into widget keys so rows are redrawn from the new order.
"""

from __future__ import annotations
import logging
from typing import Optional

from cleaner import join_skills, parse_skills
from exporter import export_pdf
from list_editor import append_entry, remove_entry, reorder_entries, set_entry_field
from preview import Preview, build_preview, render_html
from schema_resume import ResumeDocument, blank_resume, set_personal_field, set_skills
from steps import WizardState

log = logging.getLogger(__name__)


class ResumeSession:
    def __init__(self, document: ResumeDocument | None = None,
                 wizard: WizardState | None = None):
        self.document = document if document is not None else blank_resume()
        self.wizard = wizard if wizard is not None else WizardState()
        self.layout_version = 0

    # ─────────────────────────────── fields ──
    def set_field(self, name: str, value: str) -> None:
        self.document = set_personal_field(self.document, name, value)

    @property
    def skills_text(self) -> str:
        return join_skills(self.document.skills)

    def set_skills_text(self, text: str) -> None:
        self.document = set_skills(self.document, parse_skills(text))

    # ─────────────────────────────── list sections ──
    def add_entry(self, section: str) -> None:
        self.document = append_entry(self.document, section)
        self.layout_version += 1

    def remove_entry(self, section: str, index: int) -> None:
        self.document = remove_entry(self.document, section, index)
        self.layout_version += 1

    def move_entry(self, section: str, source: int, destination: Optional[int]) -> None:
        self.document = reorder_entries(self.document, section, source, destination)
        self.layout_version += 1

    def set_entry_field(self, section: str, index: int, field_name: str, value: str) -> None:
        self.document = set_entry_field(self.document, section, index, field_name, value)

    # ─────────────────────────────── navigation ──
    def next_step(self) -> None:
        self.wizard = self.wizard.next()
        log.debug("step → %s", self.wizard.step.key)

    def previous_step(self) -> None:
        self.wizard = self.wizard.previous()
        log.debug("step → %s", self.wizard.step.key)

    # ─────────────────────────────── read side ──
    def preview(self) -> Preview:
        return build_preview(self.document)

    def preview_html(self) -> str:
        return render_html(self.preview())

    def export(self) -> bytes:
        """PDF of the current preview (always rebuilt from the latest document)."""
        return export_pdf(self.preview())
