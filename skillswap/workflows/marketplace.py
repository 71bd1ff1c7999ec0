"""
Marketplace query engine.

A MarketplaceQuery holds live filter/sort settings and derives the
listing view from a catalog on demand. Deriving is pure: the same
settings over the same catalog always give the same list.
"""

import logging
from enum import StrEnum
from functools import lru_cache
from typing import Iterable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pyuca import Collator

from ..models.listing import Listing
from ..models.skill import SkillLevel
from .catalog import ListingCatalog


logger = logging.getLogger(__name__)

ALL = "all"


class SortMode(StrEnum):
    RECOMMENDED = "recommended"
    RATING = "rating"
    ALPHABETICAL = "alphabetical"


class QueryState(BaseModel):
    """Marketplace search, filter and sort settings."""

    model_config = ConfigDict(validate_assignment=True)

    search_text: str = Field(
        default="", description="Case-insensitive match on title or description",
    )
    category: str = Field(
        default=ALL, description="Exact category, or 'all'",
    )
    level: Union[SkillLevel, Literal["all"]] = Field(
        default=ALL, description="Exact skill level, or 'all'",
    )
    sort_mode: SortMode = SortMode.RECOMMENDED


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loads the Unicode collation table once
    return Collator()


def collation_key(text: str) -> tuple[int, ...]:
    """
    Sort key for locale-aware string comparison (Unicode Collation Algorithm).

    Base letters decide first, so accented titles sit next to their
    unaccented neighbours ("Éclair" < "Fencing"). Case only breaks ties,
    lower case first ("apple" < "Apple" < "banana").
    """
    return _collator().sort_key(text)


def results_label(count: int) -> str:
    """Result count line shown above the listing grid."""
    return f"{count} {'skill' if count == 1 else 'skills'} found"


class MarketplaceQuery:
    """
    Filter and sort configuration over a listing catalog.

    Usage:
        query = MarketplaceQuery()
        query.set_category("Arts")
        query.set_sort_mode("alphabetical")
        results = query.derive(ListingCatalog.seeded())
    """

    def __init__(self, state: Optional[QueryState] = None):
        self.state = state if state is not None else QueryState()

    def set_search_text(self, text: str) -> None:
        self.state.search_text = text

    def set_category(self, category: str) -> None:
        self.state.category = category

    def set_level(self, level: Union[SkillLevel, str]) -> None:
        self.state.level = level

    def set_sort_mode(self, sort_mode: Union[SortMode, str]) -> None:
        self.state.sort_mode = sort_mode

    def reset(self) -> None:
        """Restore default settings."""
        self.state = QueryState()

    def matches(self, listing: Listing) -> bool:
        """Check a listing against every active filter."""
        state = self.state

        # Search filter
        if state.search_text:
            needle = state.search_text.lower()
            if needle not in listing.title.lower() and needle not in listing.description.lower():
                return False

        # Category filter
        if state.category != ALL and listing.category != state.category:
            return False

        # Level filter
        if state.level != ALL and listing.level != state.level:
            return False

        return True

    def derive(self, catalog: Union[ListingCatalog, Iterable[Listing]]) -> list[Listing]:
        """
        Filter and sort the catalog with the current settings.

        Args:
            catalog: A ListingCatalog, or any iterable of listings

        Returns:
            Matching listings; an empty catalog gives an empty list
        """
        listings = catalog.all() if isinstance(catalog, ListingCatalog) else tuple(catalog)
        filtered = [listing for listing in listings if self.matches(listing)]

        # sorted() is stable, so ties keep catalog order
        sort_mode = self.state.sort_mode
        if sort_mode == SortMode.RATING:
            results = sorted(filtered, key=lambda listing: -listing.owner.rating)
        elif sort_mode == SortMode.ALPHABETICAL:
            results = sorted(filtered, key=lambda listing: collation_key(listing.title))
        else:
            results = filtered

        logger.debug(
            "Derived %d of %d listings (search=%r, category=%s, level=%s, sort=%s)",
            len(results), len(listings), self.state.search_text,
            self.state.category, self.state.level, sort_mode.value,
        )
        return results
