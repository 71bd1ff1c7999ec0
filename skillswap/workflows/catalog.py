"""Listing catalog: the read-only collection the marketplace queries."""

import logging
import math
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

import jsonschema
import yaml

from ..models.listing import Listing, ListingOwner
from ..models.skill import SkillLevel


logger = logging.getLogger(__name__)


# Category filter vocabulary offered by the marketplace
MARKETPLACE_CATEGORIES = (
    "Programming",
    "Arts",
    "Languages",
    "Fitness",
    "Music",
    "Professional",
)

_AVATAR_BASE = "https://api.dicebear.com/7.x/avataaars/svg?seed="

SEED_LISTINGS = (
    Listing(
        id="1",
        title="JavaScript Programming",
        category="Programming",
        level=SkillLevel.INTERMEDIATE,
        description="Learn modern JavaScript with practical examples and real-world applications.",
        owner=ListingOwner("user1", "Alex Johnson", _AVATAR_BASE + "Alex", 4.8),
    ),
    Listing(
        id="2",
        title="Digital Photography",
        category="Arts",
        level=SkillLevel.BEGINNER,
        description="Master the basics of composition, lighting, and editing for stunning photos.",
        owner=ListingOwner("user2", "Sarah Williams", _AVATAR_BASE + "Sarah", 4.5),
    ),
    Listing(
        id="3",
        title="French Language",
        category="Languages",
        level=SkillLevel.ADVANCED,
        description="Conversational French with focus on pronunciation and everyday vocabulary.",
        owner=ListingOwner("user3", "Michel Dubois", _AVATAR_BASE + "Michel", 4.9),
    ),
    Listing(
        id="4",
        title="Yoga Instruction",
        category="Fitness",
        level=SkillLevel.INTERMEDIATE,
        description="Learn to teach yoga flows with proper alignment and breathing techniques.",
        owner=ListingOwner("user4", "Priya Patel", _AVATAR_BASE + "Priya", 5.0),
    ),
    Listing(
        id="5",
        title="Piano Lessons",
        category="Music",
        level=SkillLevel.BEGINNER,
        description="Start your piano journey with fundamentals of music theory and practice.",
        owner=ListingOwner("user5", "David Chen", _AVATAR_BASE + "David", 4.7),
    ),
    Listing(
        id="6",
        title="Data Science",
        category="Programming",
        level=SkillLevel.EXPERT,
        description="Advanced data analysis techniques using Python, R, and visualization tools.",
        owner=ListingOwner("user6", "Emma Watson", _AVATAR_BASE + "Emma", 4.9),
    ),
    Listing(
        id="7",
        title="Graphic Design",
        category="Arts",
        level=SkillLevel.INTERMEDIATE,
        description="Create stunning visual designs using industry-standard tools and techniques.",
        owner=ListingOwner("user7", "Marcus Lee", _AVATAR_BASE + "Marcus", 4.6),
    ),
    Listing(
        id="8",
        title="Public Speaking",
        category="Professional",
        level=SkillLevel.ADVANCED,
        description="Master the art of engaging presentations and confident public speaking.",
        owner=ListingOwner("user8", "Olivia Martinez", _AVATAR_BASE + "Olivia", 4.8),
    ),
)

# JSON Schema for YAML catalog files
CATALOG_SCHEMA = {
    "type": "object",
    "required": ["listings"],
    "properties": {
        "listings": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "title", "category", "level", "owner"],
                "properties": {
                    "id": {"type": ["string", "integer"]},
                    "title": {"type": "string", "minLength": 1},
                    "category": {"type": "string", "minLength": 1},
                    "level": {"enum": [level.value for level in SkillLevel]},
                    "description": {"type": "string"},
                    "owner": {
                        "type": "object",
                        "required": ["id", "name"],
                        "properties": {
                            "id": {"type": ["string", "integer"]},
                            "name": {"type": "string"},
                            "avatar_ref": {"type": "string"},
                            "rating": {"type": "number", "minimum": 0, "maximum": 5},
                        },
                    },
                },
            },
        },
    },
}


class CatalogError(ValueError):
    """Raised when a catalog file cannot be parsed or fails validation."""


class ListingCatalog:
    """
    Fixed, ordered collection of listings.

    The catalog never changes once built; populating it is the job of
    whoever supplies the listings (seed data, a YAML file or a client).
    """

    def __init__(self, listings: Iterable[Listing] = ()):
        self._listings: tuple[Listing, ...] = tuple(listings)

    @classmethod
    def seeded(cls) -> "ListingCatalog":
        """Catalog holding the built-in demo listings."""
        return cls(SEED_LISTINGS)

    def all(self) -> tuple[Listing, ...]:
        """All listings in catalog order."""
        return self._listings

    def get(self, listing_id: str) -> Optional[Listing]:
        """Get a listing by ID."""
        for listing in self._listings:
            if listing.id == listing_id:
                return listing
        return None

    def categories(self) -> list[str]:
        """Distinct categories in order of first appearance."""
        seen = []
        for listing in self._listings:
            if listing.category not in seen:
                seen.append(listing.category)
        return seen

    def __iter__(self) -> Iterator[Listing]:
        return iter(self._listings)

    def __len__(self) -> int:
        return len(self._listings)


def load_catalog(path: Union[str, Path]) -> ListingCatalog:
    """
    Load a catalog from a YAML file.

    The file holds a top-level ``listings`` list; each entry mirrors
    Listing.to_dict().

    Raises:
        FileNotFoundError: If the file does not exist
        CatalogError: If the YAML is malformed or fails schema validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {"listings": []}

    try:
        jsonschema.validate(instance=data, schema=CATALOG_SCHEMA)
    except jsonschema.ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e.message}") from e

    # NaN slips through the schema minimum/maximum checks
    for index, item in enumerate(data["listings"]):
        rating = item["owner"].get("rating", 0.0)
        if not math.isfinite(rating):
            raise CatalogError(
                f"Invalid catalog {path}: listings[{index}] rating {rating} is outside 0-5"
            )

    catalog = ListingCatalog(Listing.from_dict(item) for item in data["listings"])
    logger.info("Loaded %d listings from %s", len(catalog), path)
    return catalog
