"""
Profile draft built up by the onboarding wizard.

The draft is deliberately permissive: every field may stay blank and
no value is validated. Whatever policy applies to incomplete profiles
belongs to whoever receives the draft when onboarding completes.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .skill import SkillSet


logger = logging.getLogger(__name__)


class LearningStyle(Enum):
    """Preferred ways of taking in new material."""
    VISUAL = "Visual"
    AUDITORY = "Auditory"
    KINESTHETIC = "Kinesthetic"
    READING_WRITING = "Reading/Writing"


class SessionFormat(Enum):
    """Preferred format for exchange sessions."""
    IN_PERSON = "In-Person"
    VIRTUAL = "Virtual"
    TEXT_BASED = "Text-Based"
    FLEXIBLE = "Flexible"


# Fields assignable through set_field()
EDITABLE_FIELDS = ("name", "bio", "location", "goals", "avatar_ref")


@dataclass(frozen=True)
class ProfileSummary:
    """Read-only projection of a draft, shaped for the Review step."""

    name: str
    bio: str
    location: str
    avatar_ref: Optional[str]
    teach_skills: tuple[str, ...]
    learn_skills: tuple[str, ...]
    goals: str
    learning_styles: tuple[str, ...] = ()
    session_formats: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name or "Your Name"

    @property
    def display_location(self) -> str:
        return self.location or "Your Location"

    @property
    def avatar_initial(self) -> str:
        """Fallback avatar letter when no image is set."""
        return self.name[0].upper() if self.name else "?"

    @property
    def display_goals(self) -> str:
        return self.goals or "No goals provided"

    @property
    def teach_skills_message(self) -> Optional[str]:
        """Placeholder shown instead of an empty teaching list."""
        return None if self.teach_skills else "No teaching skills selected"

    @property
    def learn_skills_message(self) -> Optional[str]:
        """Placeholder shown instead of an empty learning list."""
        return None if self.learn_skills else "No learning skills selected"


@dataclass
class ProfileDraft:
    """In-progress profile owned by a single onboarding session."""

    # Personal info
    name: str = ""
    bio: str = ""
    location: str = ""
    avatar_ref: Optional[str] = None  # Opaque handle from the avatar uploader

    # Skills
    teach_skills: SkillSet = field(default_factory=SkillSet)
    learn_skills: SkillSet = field(default_factory=SkillSet)

    # Goals & preferences
    goals: str = ""
    learning_styles: set[LearningStyle] = field(default_factory=set)
    session_formats: set[SessionFormat] = field(default_factory=set)

    def set_field(self, name: str, value) -> None:
        """Assign a scalar field. Unknown field names are ignored."""
        if name not in EDITABLE_FIELDS:
            logger.debug("Ignoring edit to unknown profile field '%s'", name)
            return
        setattr(self, name, value)

    def add_teach_skill(self, label: str) -> SkillSet:
        return self.teach_skills.add(label)

    def remove_teach_skill(self, label: str) -> SkillSet:
        return self.teach_skills.remove(label)

    def toggle_teach_skill(self, label: str) -> SkillSet:
        return self.teach_skills.toggle(label)

    def add_learn_skill(self, label: str) -> SkillSet:
        return self.learn_skills.add(label)

    def remove_learn_skill(self, label: str) -> SkillSet:
        return self.learn_skills.remove(label)

    def toggle_learn_skill(self, label: str) -> SkillSet:
        return self.learn_skills.toggle(label)

    def toggle_learning_style(self, style: LearningStyle) -> None:
        if style in self.learning_styles:
            self.learning_styles.discard(style)
        else:
            self.learning_styles.add(style)

    def toggle_session_format(self, session_format: SessionFormat) -> None:
        if session_format in self.session_formats:
            self.session_formats.discard(session_format)
        else:
            self.session_formats.add(session_format)

    def to_summary(self) -> ProfileSummary:
        """Snapshot the draft for review without touching it."""
        return ProfileSummary(
            name=self.name,
            bio=self.bio,
            location=self.location,
            avatar_ref=self.avatar_ref,
            teach_skills=tuple(self.teach_skills),
            learn_skills=tuple(self.learn_skills),
            goals=self.goals,
            # Enum declaration order, not selection order
            learning_styles=tuple(
                s.value for s in LearningStyle if s in self.learning_styles
            ),
            session_formats=tuple(
                f.value for f in SessionFormat if f in self.session_formats
            ),
        )

    def to_dict(self) -> dict:
        """Serialize draft to dictionary."""
        summary = self.to_summary()
        return {
            "name": self.name,
            "bio": self.bio,
            "location": self.location,
            "avatar_ref": self.avatar_ref,
            "teach_skills": self.teach_skills.to_list(),
            "learn_skills": self.learn_skills.to_list(),
            "goals": self.goals,
            "learning_styles": list(summary.learning_styles),
            "session_formats": list(summary.session_formats),
        }
