#!/usr/bin/env python3
"""
Command-line interface for the SkillSwap marketplace.

This CLI provides tools for members to:
- Browse and search marketplace listings
- See the category and level filters
- Walk through profile onboarding
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from skillswap.api.client import SkillSwapClient
from skillswap.models.listing import ListingOwner
from skillswap.models.profile import LearningStyle, ProfileDraft, SessionFormat
from skillswap.models.skill import SkillLevel
from skillswap.workflows.catalog import CatalogError, MARKETPLACE_CATEGORIES
from skillswap.workflows.marketplace import MarketplaceQuery, SortMode, results_label
from skillswap.workflows.onboarding import (
    ONBOARDING_STEPS,
    OnboardingWizard,
    SKILL_CATEGORIES,
    popular_skills,
)

ONBOARD_HELP = """
Commands:
  next | back                     Move between steps
  set <field> <value>             Set name, bio, location or goals
  teach add|remove|toggle <skill> Edit skills you can teach
  learn add|remove|toggle <skill> Edit skills you want to learn
  style <learning style>          Toggle a learning style
  format <session format>         Toggle a session format
  suggest <category>              Show popular skills for a category
  show                            Show the profile so far
  help                            Show this help
  quit                            Leave without completing
""".strip()


def get_client(args) -> SkillSwapClient:
    catalog = Path(args.catalog) if getattr(args, "catalog", None) else None
    return SkillSwapClient(catalog_path=catalog)


def stars(owner: ListingOwner) -> str:
    full, half, empty = owner.star_breakdown()
    return "★" * full + "½" * half + "☆" * empty + f" {owner.rating:.1f}"


# === Marketplace Commands ===

def cmd_browse(args):
    """Search and filter marketplace listings."""
    console = Console()
    client = get_client(args)

    try:
        listings = client.fetch_listings()
    except (FileNotFoundError, CatalogError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    query = MarketplaceQuery()
    query.set_search_text(args.search or "")
    query.set_category(args.category)
    query.set_level(args.level)
    query.set_sort_mode(args.sort)

    results = query.derive(listings)

    console.print(results_label(len(results)))
    if not results:
        console.print("No skills found matching your criteria.")
        console.print("Try adjusting your filters or search query.")
        return

    table = Table(show_lines=False)
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Level")
    table.add_column("Teacher")
    table.add_column("Rating")

    for listing in results:
        color = listing.level.badge_color
        table.add_row(
            escape(listing.id),
            escape(listing.title),
            escape(listing.category),
            f"[{color}]{listing.level.value}[/{color}]",
            escape(listing.owner.name),
            stars(listing.owner),
        )

    console.print(table)

    if args.details:
        for listing in results:
            console.print(f"\n[bold]{escape(listing.title)}[/bold]")
            console.print(listing.description, markup=False)


def cmd_categories(args):
    """Show the available filters."""
    console = Console()
    console.print("[bold]Categories[/bold]")
    for category in MARKETPLACE_CATEGORIES:
        console.print(f"  - {category}")
    console.print("[bold]Skill Levels[/bold]")
    for level in SkillLevel:
        console.print(f"  - {level.value}")
    console.print("[bold]Sort Modes[/bold]")
    for mode in SortMode:
        console.print(f"  - {mode.value}")


# === Onboarding Commands ===

def print_step(console: Console, wizard: OnboardingWizard) -> None:
    console.print(
        f"\n[bold]Step {wizard.current_step + 1}/{wizard.step_count}: "
        f"{wizard.step_label}[/bold] ({wizard.progress_percent:.0f}%)"
    )
    if wizard.is_last_step:
        print_summary(console, wizard.draft)
    console.print(f"Type 'next' to {wizard.primary_action_label.lower()}.")


def print_summary(console: Console, draft: ProfileDraft) -> None:
    summary = draft.to_summary()
    lines = [
        f"[{summary.avatar_initial}] {summary.display_name}",
        summary.display_location,
    ]
    if summary.bio:
        lines.append(summary.bio)
    lines.append("Skills I Can Teach: " + (
        ", ".join(summary.teach_skills) or summary.teach_skills_message
    ))
    lines.append("Skills I Want to Learn: " + (
        ", ".join(summary.learn_skills) or summary.learn_skills_message
    ))
    lines.append(f"Learning Goals: {summary.display_goals}")
    if summary.learning_styles:
        lines.append("Learning Styles: " + ", ".join(summary.learning_styles))
    if summary.session_formats:
        lines.append("Session Formats: " + ", ".join(summary.session_formats))
    # Member-entered text is printed verbatim
    for line in lines:
        console.print(line, markup=False)


def _parse_enum(enum_cls, text: str):
    for member in enum_cls:
        if member.value.lower() == text.lower():
            return member
    return None


def run_onboarding_command(console: Console, wizard: OnboardingWizard, line: str) -> bool:
    """
    Apply one onboarding command.

    Returns False when the session should end.
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return True
    command = parts[0].lower()
    rest = parts[1] if len(parts) > 1 else ""
    draft = wizard.draft

    if command == "next":
        finishing = wizard.is_last_step
        wizard.advance()
        if finishing:
            return False
        print_step(console, wizard)
    elif command == "back":
        wizard.retreat()
        print_step(console, wizard)
    elif command == "set":
        field_parts = rest.split(maxsplit=1)
        if field_parts:
            draft.set_field(field_parts[0], field_parts[1] if len(field_parts) > 1 else "")
    elif command in ("teach", "learn"):
        action_parts = rest.split(maxsplit=1)
        action = action_parts[0].lower() if action_parts else ""
        label = action_parts[1].strip() if len(action_parts) > 1 else ""
        skills = draft.teach_skills if command == "teach" else draft.learn_skills
        if action == "add":
            skills.add(label)
        elif action == "remove":
            skills.remove(label)
        elif action == "toggle":
            skills.toggle(label)
        else:
            console.print(f"Unknown action '{action}'. Use add, remove or toggle.")
            return True
        console.print(", ".join(skills) or "(none)", markup=False)
    elif command == "style":
        style = _parse_enum(LearningStyle, rest)
        if style:
            draft.toggle_learning_style(style)
        else:
            console.print("Styles: " + ", ".join(s.value for s in LearningStyle))
    elif command == "format":
        session_format = _parse_enum(SessionFormat, rest)
        if session_format:
            draft.toggle_session_format(session_format)
        else:
            console.print("Formats: " + ", ".join(f.value for f in SessionFormat))
    elif command == "suggest":
        suggestions = popular_skills(rest)
        if suggestions:
            console.print(", ".join(suggestions))
        else:
            console.print("Categories: " + ", ".join(SKILL_CATEGORIES))
    elif command == "show":
        print_summary(console, draft)
    elif command == "help":
        console.print(ONBOARD_HELP, markup=False)
    elif command == "quit":
        return False
    else:
        console.print(f"Unknown command '{command}'. Type 'help' for commands.")
    return True


def cmd_onboard(args):
    """Walk through profile onboarding interactively."""
    console = Console()
    client = get_client(args)
    completed: list[ProfileDraft] = []

    def on_complete(draft: ProfileDraft) -> None:
        client.complete_profile(draft)
        completed.append(draft)

    wizard = OnboardingWizard(on_complete=on_complete)

    if args.avatar:
        try:
            wizard.draft.set_field("avatar_ref", client.upload_avatar(args.avatar))
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}")
            sys.exit(1)

    console.print("[bold]Set Up Your Profile[/bold]")
    console.print(" -> ".join(ONBOARDING_STEPS))
    console.print("Type 'help' for commands.")
    print_step(console, wizard)

    # The session ends on first completion; the wizard itself stays on Review
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if not run_onboarding_command(console, wizard, line):
            break

    if completed:
        console.print("Profile complete!")
        print(json.dumps(completed[0].to_dict(), indent=2))
    else:
        console.print("Onboarding not completed.")


# === Main CLI ===

def main(argv: Optional[list[str]] = None):
    parser = argparse.ArgumentParser(
        description="SkillSwap Marketplace CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Browse:       skillswap browse --search java
  Filter:       skillswap browse --category Arts --sort alphabetical
  Filters:      skillswap categories
  Onboard:      skillswap onboard --avatar me.png
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Browse
    browse_parser = subparsers.add_parser("browse", help="Browse marketplace listings")
    browse_parser.add_argument("--search", help="Search text (title or description)")
    browse_parser.add_argument("--category", default="all", help="Category filter (default: all)")
    browse_parser.add_argument("--level", default="all",
                               choices=["all"] + [level.value for level in SkillLevel],
                               help="Skill level filter (default: all)")
    browse_parser.add_argument("--sort", default=SortMode.RECOMMENDED.value,
                               choices=[mode.value for mode in SortMode],
                               help="Sort order (default: recommended)")
    browse_parser.add_argument("--catalog", help="YAML catalog file (default: $SKILLSWAP_CATALOG or seed data)")
    browse_parser.add_argument("--details", action="store_true", help="Show listing descriptions")
    browse_parser.set_defaults(func=cmd_browse)

    # Categories
    categories_parser = subparsers.add_parser("categories", help="Show available filters")
    categories_parser.set_defaults(func=cmd_categories)

    # Onboard
    onboard_parser = subparsers.add_parser("onboard", help="Set up your profile")
    onboard_parser.add_argument("--avatar", help="Profile image to upload")
    onboard_parser.set_defaults(func=cmd_onboard)

    # Parse and execute
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
