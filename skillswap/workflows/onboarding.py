"""
Onboarding wizard: a fixed five-step sequencer over a profile draft.

Steps:
    Personal Info -> Skills to Teach -> Skills to Learn ->
        Goals & Preferences -> Review

Completion is not a state. Advancing from the Review step hands the
draft to the completion callback and leaves the wizard on Review, so a
second "Complete Setup" click fires the callback again.
"""

import logging
from typing import Callable, Optional

from ..models.profile import ProfileDraft


logger = logging.getLogger(__name__)


ONBOARDING_STEPS = (
    "Personal Info",
    "Skills to Teach",
    "Skills to Learn",
    "Goals & Preferences",
    "Review",
)

# Suggestions offered by the category browser on both skill steps
SKILL_CATEGORIES = (
    "Technology",
    "Arts & Crafts",
    "Languages",
    "Music",
    "Cooking",
    "Fitness",
    "Business",
    "Academic",
)

POPULAR_SKILLS: dict[str, tuple[str, ...]] = {
    "Technology": ("JavaScript", "Python", "React", "UX Design", "Data Science"),
    "Arts & Crafts": ("Drawing", "Painting", "Knitting", "Photography", "Pottery"),
    "Languages": ("Spanish", "French", "Mandarin", "German", "Japanese"),
    "Music": ("Guitar", "Piano", "Singing", "Music Production", "Drums"),
    "Cooking": ("Baking", "Italian Cuisine", "Vegan Cooking", "Pastry", "BBQ"),
    "Fitness": ("Yoga", "Weight Training", "Running", "Dance", "Meditation"),
    "Business": ("Marketing", "Public Speaking", "Negotiation", "Leadership", "Finance"),
    "Academic": ("Mathematics", "Physics", "Literature", "History", "Biology"),
}


def popular_skills(category: str) -> list[str]:
    """Suggested skills for a browser tab (empty for unknown tabs)."""
    return list(POPULAR_SKILLS.get(category, ()))


def _noop_complete(draft: ProfileDraft) -> None:
    return None


class OnboardingWizard:
    """
    Step sequencer for profile onboarding.

    Owns the current step and a ProfileDraft. No step validates the
    draft before allowing the user to move on; every field is optional.

    Usage:
        wizard = OnboardingWizard(on_complete=save_profile)
        wizard.draft.set_field("name", "Ada")
        wizard.advance()
    """

    def __init__(
        self,
        on_complete: Optional[Callable[[ProfileDraft], None]] = None,
        draft: Optional[ProfileDraft] = None,
    ):
        """
        Initialize the wizard at the first step.

        Args:
            on_complete: Called with the draft when advancing past Review
            draft: Existing draft to continue editing (new empty draft if None)
        """
        if on_complete is None:
            on_complete = _noop_complete
        if not callable(on_complete):
            raise TypeError("on_complete must be callable")

        self.on_complete = on_complete
        self.draft = draft if draft is not None else ProfileDraft()
        self.current_step = 0

    @property
    def step_count(self) -> int:
        return len(ONBOARDING_STEPS)

    @property
    def step_label(self) -> str:
        return ONBOARDING_STEPS[self.current_step]

    @property
    def is_first_step(self) -> bool:
        return self.current_step == 0

    @property
    def is_last_step(self) -> bool:
        return self.current_step == self.step_count - 1

    @property
    def progress(self) -> float:
        """Fraction of the flow reached, counting the current step."""
        return (self.current_step + 1) / self.step_count

    @property
    def progress_percent(self) -> float:
        return self.progress * 100

    @property
    def primary_action_label(self) -> str:
        return "Complete Setup" if self.is_last_step else "Continue"

    def completed_steps(self) -> list[str]:
        """Labels of the steps already passed."""
        return list(ONBOARDING_STEPS[:self.current_step])

    def advance(self) -> int:
        """
        Move to the next step, or complete the flow from the last step.

        Returns:
            The current step after the call
        """
        if self.current_step < self.step_count - 1:
            self.current_step += 1
            logger.debug("Onboarding advanced to step %d (%s)", self.current_step, self.step_label)
        else:
            logger.info("Onboarding complete for '%s'", self.draft.name)
            self.on_complete(self.draft)
        return self.current_step

    def retreat(self) -> int:
        """Move back one step. No-op on the first step."""
        if self.current_step > 0:
            self.current_step -= 1
        return self.current_step
