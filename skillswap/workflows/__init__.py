"""Workflows for onboarding and marketplace browsing."""

from .onboarding import OnboardingWizard, ONBOARDING_STEPS, POPULAR_SKILLS, SKILL_CATEGORIES
from .catalog import ListingCatalog, CatalogError, load_catalog, MARKETPLACE_CATEGORIES
from .marketplace import MarketplaceQuery, QueryState, SortMode, results_label

__all__ = [
    "OnboardingWizard",
    "ONBOARDING_STEPS",
    "POPULAR_SKILLS",
    "SKILL_CATEGORIES",
    "ListingCatalog",
    "CatalogError",
    "load_catalog",
    "MARKETPLACE_CATEGORIES",
    "MarketplaceQuery",
    "QueryState",
    "SortMode",
    "results_label",
]
