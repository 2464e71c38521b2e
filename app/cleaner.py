"""
Skills text ⇄ skills list.

The skills box is free text; the résumé keeps a list.  The pair below is
deliberately *not* a strict round trip:
  – whitespace around each name is trimmed
  – empty pieces (leading/trailing/doubled commas) are kept as ""
"""
from __future__ import annotations
from typing import Iterable, List

SKILL_SEP = ","
SKILL_JOIN = ", "


def parse_skills(text: str) -> List[str]:
    """'Go, Rust,  TypeScript' → ['Go', 'Rust', 'TypeScript']"""
    return [s.strip() for s in (text or "").split(SKILL_SEP)]


def join_skills(skills: Iterable[str]) -> str:
    """['Go', 'Rust'] → 'Go, Rust'"""
    return SKILL_JOIN.join(skills)
