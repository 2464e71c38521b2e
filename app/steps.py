"""
Wizard steps and the cursor that walks them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Step:
    key: str
    title: str
    icon: str


STEPS: Tuple[Step, ...] = (
    Step("personal", "Personal Information", "💼"),
    Step("summary", "Professional Summary", "🏅"),
    Step("experience", "Work Experience", "💼"),
    Step("education", "Education", "🎓"),
    Step("skills", "Skills", "💻"),
    Step("review", "Review & Export", "📥"),
)

STEP_COUNT = len(STEPS)


@dataclass(frozen=True)
class WizardState:
    """Index of the visible step; next/previous saturate at both ends."""

    current_step_index: int = 0

    def __post_init__(self):
        if not 0 <= self.current_step_index < STEP_COUNT:
            raise ValueError(
                f"step index {self.current_step_index} outside 0..{STEP_COUNT - 1}"
            )

    def next(self) -> "WizardState":
        return WizardState(min(STEP_COUNT - 1, self.current_step_index + 1))

    def previous(self) -> "WizardState":
        return WizardState(max(0, self.current_step_index - 1))

    @property
    def step(self) -> Step:
        return STEPS[self.current_step_index]

    @property
    def is_first(self) -> bool:
        return self.current_step_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_step_index == STEP_COUNT - 1

    @property
    def progress(self) -> float:
        """0.0 on the first step, 1.0 on the review step."""
        return self.current_step_index / (STEP_COUNT - 1)
