"""Skill labels, skill levels and the ordered skill set used by the pickers."""

import logging
from enum import Enum
from typing import Iterable, Iterator, Optional


logger = logging.getLogger(__name__)


class SkillLevel(Enum):
    """Proficiency level attached to a marketplace listing."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    @property
    def rank(self) -> int:
        """Position in the Beginner -> Expert progression."""
        order = [
            SkillLevel.BEGINNER,
            SkillLevel.INTERMEDIATE,
            SkillLevel.ADVANCED,
            SkillLevel.EXPERT,
        ]
        return order.index(self)

    @property
    def badge_color(self) -> str:
        """Badge colour used when rendering the level."""
        colors = {
            SkillLevel.BEGINNER: "blue",
            SkillLevel.INTERMEDIATE: "green",
            SkillLevel.ADVANCED: "purple",
            SkillLevel.EXPERT: "orange",
        }
        return colors[self]

    def __lt__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, SkillLevel):
            return NotImplemented
        return self.rank >= other.rank


class SkillSet:
    """
    Ordered, duplicate-free collection of skill labels.

    Labels are compared exactly as entered (no case or whitespace
    normalisation). Every operation is total: empty or repeated labels
    are absorbed silently so form handlers never need to guard calls.
    Mutators work in place and return the set so calls can be chained.
    """

    def __init__(self, labels: Iterable[str] = ()):
        self._labels: list[str] = []
        # (label, index) of the last toggle-off, cleared by any other mutation
        self._toggled_off: Optional[tuple[str, int]] = None
        for label in labels:
            self.add(label)

    def add(self, label: str) -> "SkillSet":
        """Append a label unless it is empty or already present."""
        if not isinstance(label, str) or not label:
            logger.debug("Ignoring empty skill label")
            return self
        if label in self._labels:
            logger.debug("Skill '%s' already selected", label)
            return self
        self._toggled_off = None
        self._labels.append(label)
        return self

    def remove(self, label: str) -> "SkillSet":
        """Remove a label if present."""
        if label in self._labels:
            self._toggled_off = None
            self._labels.remove(label)
        return self

    def toggle(self, label: str) -> "SkillSet":
        """
        Remove the label if selected, otherwise add it.

        Toggling a label back on right after toggling it off puts it
        back where it was, so a double click leaves the set unchanged.
        """
        if self.contains(label):
            index = self._labels.index(label)
            self.remove(label)
            self._toggled_off = (label, index)
            return self

        if self._toggled_off is not None and self._toggled_off[0] == label:
            index = self._toggled_off[1]
            self._toggled_off = None
            self._labels.insert(index, label)
            return self
        return self.add(label)

    def contains(self, label: str) -> bool:
        return label in self._labels

    def to_list(self) -> list[str]:
        """Labels in insertion order (a copy)."""
        return list(self._labels)

    @classmethod
    def from_list(cls, labels: Iterable[str]) -> "SkillSet":
        return cls(labels)

    def __contains__(self, label) -> bool:
        return self.contains(label)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._labels))

    def __len__(self) -> int:
        return len(self._labels)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SkillSet):
            return NotImplemented
        return self._labels == other._labels

    def __repr__(self) -> str:
        return f"SkillSet({self._labels!r})"
