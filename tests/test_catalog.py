"""Tests for the listing catalog and YAML loader."""
from __future__ import annotations

import pytest
import yaml

from skillswap.models.listing import Listing, ListingOwner
from skillswap.models.skill import SkillLevel
from skillswap.workflows.catalog import (
    CatalogError,
    ListingCatalog,
    MARKETPLACE_CATEGORIES,
    SEED_LISTINGS,
    load_catalog,
)


def make_listing(listing_id="x1", title="Knitting", category="Arts",
                 level=SkillLevel.BEGINNER, rating=4.0):
    return Listing(
        id=listing_id,
        title=title,
        category=category,
        level=level,
        description=f"{title} lessons",
        owner=ListingOwner(id=f"owner-{listing_id}", name="Sam Doe", rating=rating),
    )


# -------------------------------------------------------------------
# ListingCatalog
# -------------------------------------------------------------------


class TestSeededCatalog:
    def test_eight_listings(self):
        catalog = ListingCatalog.seeded()
        assert len(catalog) == 8
        assert catalog.all() == SEED_LISTINGS

    def test_order(self):
        titles = [listing.title for listing in ListingCatalog.seeded()]
        assert titles == [
            "JavaScript Programming",
            "Digital Photography",
            "French Language",
            "Yoga Instruction",
            "Piano Lessons",
            "Data Science",
            "Graphic Design",
            "Public Speaking",
        ]

    def test_categories_covered(self):
        catalog = ListingCatalog.seeded()
        assert set(catalog.categories()) == set(MARKETPLACE_CATEGORIES)
        assert catalog.categories()[0] == "Programming"

    def test_get(self):
        catalog = ListingCatalog.seeded()
        assert catalog.get("4").title == "Yoga Instruction"
        assert catalog.get("404") is None

    def test_ratings_in_range(self):
        for listing in SEED_LISTINGS:
            assert 0 <= listing.owner.rating <= 5


class TestListingCatalog:
    def test_empty(self):
        catalog = ListingCatalog()
        assert catalog.all() == ()
        assert catalog.categories() == []

    def test_all_is_immutable(self):
        catalog = ListingCatalog([make_listing()])
        assert isinstance(catalog.all(), tuple)

    def test_source_list_changes_do_not_leak(self):
        source = [make_listing()]
        catalog = ListingCatalog(source)
        source.append(make_listing("x2"))
        assert len(catalog) == 1


# -------------------------------------------------------------------
# Listing model
# -------------------------------------------------------------------


class TestListing:
    def test_frozen(self):
        listing = make_listing()
        with pytest.raises(Exception):
            listing.title = "Other"

    def test_dict_round_trip(self):
        listing = SEED_LISTINGS[0]
        assert Listing.from_dict(listing.to_dict()) == listing

    def test_from_dict_coerces_ids(self):
        listing = Listing.from_dict({
            "id": 7, "title": "Chess", "category": "Games", "level": "Expert",
            "owner": {"id": 3, "name": "Kim", "rating": 5},
        })
        assert listing.id == "7"
        assert listing.owner.id == "3"
        assert listing.owner.rating == 5.0
        assert listing.level == SkillLevel.EXPERT
        assert listing.description == ""

    @pytest.mark.parametrize("rating,expected", [
        (5.0, (5, 0, 0)),
        (4.8, (4, 1, 0)),
        (4.5, (4, 1, 0)),
        (4.3, (4, 0, 1)),
        (0.0, (0, 0, 5)),
    ])
    def test_star_breakdown(self, rating, expected):
        owner = ListingOwner(id="u", name="Sam", rating=rating)
        assert owner.star_breakdown() == expected

    def test_initials(self):
        assert ListingOwner(id="u", name="Alex Johnson").initials == "Al"


# -------------------------------------------------------------------
# YAML loading
# -------------------------------------------------------------------


class TestLoadCatalog:
    def test_load_valid_file(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump({
            "listings": [listing.to_dict() for listing in SEED_LISTINGS[:3]],
        }))

        catalog = load_catalog(path)
        assert catalog.all() == SEED_LISTINGS[:3]

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert len(load_catalog(path)) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("listings: [unclosed")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_unknown_level_rejected(self, tmp_path):
        path = tmp_path / "bad_level.yaml"
        data = {"listings": [SEED_LISTINGS[0].to_dict()]}
        data["listings"][0]["level"] = "Grandmaster"
        path.write_text(yaml.safe_dump(data))
        with pytest.raises(CatalogError, match="Grandmaster"):
            load_catalog(path)

    def test_rating_out_of_range_rejected(self, tmp_path):
        path = tmp_path / "bad_rating.yaml"
        data = {"listings": [SEED_LISTINGS[0].to_dict()]}
        data["listings"][0]["owner"]["rating"] = 7
        path.write_text(yaml.safe_dump(data))
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_catalog_error_is_value_error(self, tmp_path):
        path = tmp_path / "no_listings.yaml"
        path.write_text("title: not a catalog\n")
        with pytest.raises(ValueError):
            load_catalog(path)

    def test_nan_rating_rejected(self, tmp_path):
        path = tmp_path / "nan_rating.yaml"
        text = yaml.safe_dump({"listings": [SEED_LISTINGS[0].to_dict()]})
        path.write_text(text.replace("rating: 4.8", "rating: .nan"))
        with pytest.raises(CatalogError, match="nan"):
            load_catalog(path)
