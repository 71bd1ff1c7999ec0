"""Marketplace listing model."""

import math
from dataclasses import dataclass

from .skill import SkillLevel


MAX_RATING = 5


@dataclass(frozen=True)
class ListingOwner:
    """Member offering a listing."""
    id: str
    name: str
    avatar_ref: str = ""
    rating: float = 0.0  # 0-5 stars

    @property
    def initials(self) -> str:
        """Avatar fallback text."""
        return self.name[:2]

    def star_breakdown(self) -> tuple[int, int, int]:
        """
        Split the rating into (full, half, empty) stars out of five.

        A half star is shown when the fractional part is at least 0.5.
        """
        rating = min(max(self.rating, 0.0), float(MAX_RATING))
        full = math.floor(rating)
        half = 1 if full < MAX_RATING and rating % 1 >= 0.5 else 0
        return full, half, MAX_RATING - full - half


@dataclass(frozen=True)
class Listing:
    """A teachable skill offered in the marketplace. Immutable once loaded."""
    id: str
    title: str
    category: str
    level: SkillLevel
    description: str
    owner: ListingOwner

    def to_dict(self) -> dict:
        """Serialize listing to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "level": self.level.value,
            "description": self.description,
            "owner": {
                "id": self.owner.id,
                "name": self.owner.name,
                "avatar_ref": self.owner.avatar_ref,
                "rating": self.owner.rating,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Listing":
        """Deserialize listing from dictionary."""
        owner = data.get("owner", {})
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            category=data.get("category", ""),
            level=SkillLevel(data.get("level", "Beginner")),
            description=data.get("description", ""),
            owner=ListingOwner(
                id=str(owner.get("id", "")),
                name=owner.get("name", ""),
                avatar_ref=owner.get("avatar_ref", ""),
                rating=float(owner.get("rating", 0.0)),
            ),
        )
