"""Python client for the collaborators around the SkillSwap core."""

import logging
import os
from pathlib import Path
from typing import Optional

from ..models.listing import Listing
from ..models.profile import ProfileDraft, ProfileSummary
from ..workflows.catalog import ListingCatalog, load_catalog


logger = logging.getLogger(__name__)

AVATAR_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg"}


def get_catalog_path() -> Optional[Path]:
    """Get catalog file from environment (None means use seed data)."""
    catalog_path = os.environ.get("SKILLSWAP_CATALOG")
    return Path(catalog_path) if catalog_path else None


class SkillSwapClient:
    """
    Client for the services the interaction core relies on.

    This client provides methods for:
    - Fetching marketplace listings
    - Resolving an uploaded avatar image to a reference
    - Receiving completed onboarding profiles

    Usage:
        client = SkillSwapClient()
        wizard = OnboardingWizard(on_complete=client.complete_profile)
        results = MarketplaceQuery().derive(client.fetch_listings())
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = "http://localhost:8000",
        catalog_path: Optional[Path] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key for authentication (for remote API)
            base_url: Base URL of the API server
            catalog_path: YAML catalog for local mode (defaults to $SKILLSWAP_CATALOG)
        """
        self.api_key = api_key
        self.base_url = base_url
        self.catalog_path = catalog_path or get_catalog_path()

        # Use local mode if no API key provided
        self.local_mode = api_key is None

        self.completed_profiles: list[ProfileSummary] = []

    def fetch_listings(self) -> list[Listing]:
        """
        Fetch the listings the marketplace shows.

        Returns:
            Listings from the configured catalog file, or the seed catalog
        """
        if self.local_mode:
            return list(self.load_catalog().all())

        raise NotImplementedError("Remote API not yet implemented")

    def load_catalog(self) -> ListingCatalog:
        """Catalog backing fetch_listings() in local mode."""
        if self.catalog_path:
            return load_catalog(self.catalog_path)
        return ListingCatalog.seeded()

    def upload_avatar(self, file_path) -> str:
        """
        Resolve a chosen image file to an avatar reference.

        Args:
            file_path: Path to a local image file

        Returns:
            Reference to store with draft.set_field("avatar_ref", ref)
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Avatar image not found: {file_path}")
        if path.suffix.lower() not in AVATAR_EXTENSIONS:
            raise ValueError(f"Unsupported avatar image type: {path.suffix or '(none)'}")

        if self.local_mode:
            return path.resolve().as_uri()

        raise NotImplementedError("Remote API not yet implemented")

    def complete_profile(self, draft: ProfileDraft) -> ProfileSummary:
        """
        Receive a finished onboarding draft.

        Suitable as an OnboardingWizard on_complete callback. Blank
        fields are accepted as-is.
        """
        summary = draft.to_summary()
        self.completed_profiles.append(summary)
        logger.info(
            "Received profile '%s' (%d teaching, %d learning)",
            summary.display_name, len(summary.teach_skills), len(summary.learn_skills),
        )
        return summary
