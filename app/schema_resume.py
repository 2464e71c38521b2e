"""
Canonical résumé records.

All records are frozen: an edit builds a new value with dataclasses.replace()
instead of changing the old one in place.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Dict, Tuple, Type


@dataclass(frozen=True)
class ExperienceEntry:
    title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


@dataclass(frozen=True)
class EducationEntry:
    degree: str = ""
    field: str = ""
    school: str = ""
    graduation_year: str = ""


@dataclass(frozen=True)
class ResumeDocument:
    name: str = ""
    email: str = ""
    phone: str = ""
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[str, ...] = ()


# list sections → the record type of their entries
SECTIONS: Dict[str, Type] = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
}

PERSONAL_FIELDS = ("name", "email", "phone", "summary")


def blank_resume() -> ResumeDocument:
    """A fresh document: one blank entry per section, one empty skill."""
    return ResumeDocument(
        experience=(ExperienceEntry(),),
        education=(EducationEntry(),),
        skills=("",),
    )


def entry_type(section: str) -> Type:
    try:
        return SECTIONS[section]
    except KeyError:
        raise ValueError(f"Unknown section: {section!r}") from None


def field_names(record_type: Type) -> Tuple[str, ...]:
    return tuple(f.name for f in fields(record_type))


def set_personal_field(doc: ResumeDocument, name: str, value: str) -> ResumeDocument:
    """Replace one of the top-level text fields (name, email, phone, summary)."""
    if name not in PERSONAL_FIELDS:
        raise ValueError(f"Unknown personal field: {name!r}")
    return replace(doc, **{name: value})


def set_skills(doc: ResumeDocument, skills) -> ResumeDocument:
    return replace(doc, skills=tuple(skills))
