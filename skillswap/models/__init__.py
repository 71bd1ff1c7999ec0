"""Data models for skills, profile drafts and marketplace listings."""

from .skill import SkillSet, SkillLevel
from .profile import ProfileDraft, ProfileSummary, LearningStyle, SessionFormat
from .listing import Listing, ListingOwner

__all__ = [
    # Skills
    "SkillSet",
    "SkillLevel",
    # Profile
    "ProfileDraft",
    "ProfileSummary",
    "LearningStyle",
    "SessionFormat",
    # Marketplace
    "Listing",
    "ListingOwner",
]
