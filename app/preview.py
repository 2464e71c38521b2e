"""
Résumé → preview layout → HTML.

build_preview() is a pure projection: every empty field is swapped for a
placeholder so the preview always looks like a finished résumé.
render_html() turns the layout into a standalone HTML page via jinja2.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from jinja2 import Environment, FileSystemLoader

from cleaner import join_skills
from schema_resume import EducationEntry, ExperienceEntry, ResumeDocument

_CSS_PATH = Path(__file__).parent / "static" / "style.css"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)

PLACEHOLDERS = {
    "name": "Your Name",
    "email": "email@example.com",
    "phone": "(123) 456-7890",
    "summary": "A brief summary of your professional background and goals.",
    "title": "Job Title",
    "company": "Company Name",
    "start_date": "Start Date",
    "end_date": "End Date",
    "description": "Job description and achievements.",
    "degree": "Degree",
    "field": "Field of Study",
    "school": "School Name",
    "graduation_year": "Graduation Year",
    "skills": "List your key skills here.",
}


@dataclass(frozen=True)
class ExperiencePreview:
    title: str
    company: str
    dates: str
    description: str


@dataclass(frozen=True)
class EducationPreview:
    heading: str
    school: str
    graduation_year: str


@dataclass(frozen=True)
class Preview:
    name: str
    contact_line: str
    summary: str
    experience: Tuple[ExperiencePreview, ...]
    education: Tuple[EducationPreview, ...]
    skills: str


def _or(value: str, key: str) -> str:
    return value if value != "" else PLACEHOLDERS[key]


def _experience(e: ExperienceEntry) -> ExperiencePreview:
    return ExperiencePreview(
        title=_or(e.title, "title"),
        company=_or(e.company, "company"),
        dates=f"{_or(e.start_date, 'start_date')} - {_or(e.end_date, 'end_date')}",
        description=_or(e.description, "description"),
    )


def _education(e: EducationEntry) -> EducationPreview:
    return EducationPreview(
        heading=f"{_or(e.degree, 'degree')} in {_or(e.field, 'field')}",
        school=_or(e.school, "school"),
        graduation_year=_or(e.graduation_year, "graduation_year"),
    )


def build_preview(doc: ResumeDocument) -> Preview:
    return Preview(
        name=_or(doc.name, "name"),
        contact_line=f"{_or(doc.email, 'email')} | {_or(doc.phone, 'phone')}",
        summary=_or(doc.summary, "summary"),
        experience=tuple(_experience(e) for e in doc.experience),
        education=tuple(_education(e) for e in doc.education),
        skills=_or(join_skills(doc.skills), "skills"),
    )


def render_html(preview: Preview, inline: bool = True) -> str:
    """Render the layout → HTML.  If inline=True, embed CSS in a <style> tag."""
    css_inline = _CSS_PATH.read_text(encoding="utf-8") if inline else ""
    return env.get_template("preview.html").render(p=preview, inline_css=css_inline)
