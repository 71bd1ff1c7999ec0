"""Tests for the onboarding profile draft."""
from __future__ import annotations

from skillswap.models.profile import (
    LearningStyle,
    ProfileDraft,
    ProfileSummary,
    SessionFormat,
)
from skillswap.models.skill import SkillSet


class TestProfileDraftFields:
    def test_defaults_are_blank(self):
        draft = ProfileDraft()
        assert draft.name == ""
        assert draft.bio == ""
        assert draft.location == ""
        assert draft.goals == ""
        assert draft.avatar_ref is None
        assert len(draft.teach_skills) == 0
        assert len(draft.learn_skills) == 0

    def test_set_field(self):
        draft = ProfileDraft()
        draft.set_field("name", "Ada Lovelace")
        draft.set_field("location", "London, UK")
        draft.set_field("bio", "Mathematician")
        draft.set_field("goals", "Learn the piano")
        assert draft.name == "Ada Lovelace"
        assert draft.location == "London, UK"
        assert draft.bio == "Mathematician"
        assert draft.goals == "Learn the piano"

    def test_set_field_accepts_empty(self):
        draft = ProfileDraft(name="Ada")
        draft.set_field("name", "")
        assert draft.name == ""

    def test_set_avatar_ref(self):
        draft = ProfileDraft()
        draft.set_field("avatar_ref", "file:///tmp/me.png")
        assert draft.avatar_ref == "file:///tmp/me.png"

    def test_unknown_field_ignored(self):
        draft = ProfileDraft()
        draft.set_field("teach_skills", "oops")
        draft.set_field("email", "a@b.c")
        assert isinstance(draft.teach_skills, SkillSet)
        assert not hasattr(draft, "email")

    def test_drafts_do_not_share_skill_sets(self):
        first, second = ProfileDraft(), ProfileDraft()
        first.add_teach_skill("Yoga")
        assert "Yoga" not in second.teach_skills


class TestProfileDraftSkills:
    def test_teach_and_learn_are_independent(self):
        draft = ProfileDraft()
        draft.add_teach_skill("Python")
        draft.add_learn_skill("Spanish")
        assert draft.teach_skills.to_list() == ["Python"]
        assert draft.learn_skills.to_list() == ["Spanish"]

    def test_duplicate_teach_skill(self):
        draft = ProfileDraft()
        draft.add_teach_skill("Yoga")
        draft.add_teach_skill("Yoga")
        assert draft.teach_skills.to_list() == ["Yoga"]

    def test_remove_skills(self):
        draft = ProfileDraft()
        draft.add_teach_skill("Python")
        draft.add_learn_skill("Spanish")
        draft.remove_teach_skill("Python")
        draft.remove_learn_skill("Spanish")
        draft.remove_learn_skill("Never Added")
        assert len(draft.teach_skills) == 0
        assert len(draft.learn_skills) == 0

    def test_toggle_skills(self):
        draft = ProfileDraft()
        draft.toggle_teach_skill("Guitar")
        draft.toggle_learn_skill("Baking")
        assert "Guitar" in draft.teach_skills
        assert "Baking" in draft.learn_skills
        draft.toggle_teach_skill("Guitar")
        assert "Guitar" not in draft.teach_skills

    def test_preferences_toggle(self):
        draft = ProfileDraft()
        draft.toggle_learning_style(LearningStyle.VISUAL)
        draft.toggle_session_format(SessionFormat.VIRTUAL)
        assert draft.learning_styles == {LearningStyle.VISUAL}
        assert draft.session_formats == {SessionFormat.VIRTUAL}
        draft.toggle_learning_style(LearningStyle.VISUAL)
        assert draft.learning_styles == set()


class TestProfileSummary:
    def test_summary_snapshot(self):
        draft = ProfileDraft(name="Ada", location="London")
        draft.add_teach_skill("Mathematics")
        summary = draft.to_summary()

        assert isinstance(summary, ProfileSummary)
        assert summary.teach_skills == ("Mathematics",)

        draft.add_teach_skill("Poetry")
        assert summary.teach_skills == ("Mathematics",)

    def test_summary_does_not_mutate(self):
        draft = ProfileDraft(name="Ada")
        draft.add_learn_skill("Piano")
        before = draft.to_dict()
        draft.to_summary()
        assert draft.to_dict() == before

    def test_blank_fallbacks(self):
        summary = ProfileDraft().to_summary()
        assert summary.display_name == "Your Name"
        assert summary.display_location == "Your Location"
        assert summary.avatar_initial == "?"
        assert summary.display_goals == "No goals provided"
        assert summary.teach_skills_message == "No teaching skills selected"
        assert summary.learn_skills_message == "No learning skills selected"

    def test_filled_values(self):
        draft = ProfileDraft(name="ada", location="London", goals="Play jazz")
        draft.add_teach_skill("Python")
        draft.add_learn_skill("Piano")
        summary = draft.to_summary()
        assert summary.display_name == "ada"
        assert summary.avatar_initial == "A"
        assert summary.display_goals == "Play jazz"
        assert summary.teach_skills_message is None
        assert summary.learn_skills_message is None

    def test_preferences_in_declaration_order(self):
        draft = ProfileDraft()
        draft.toggle_session_format(SessionFormat.FLEXIBLE)
        draft.toggle_session_format(SessionFormat.IN_PERSON)
        summary = draft.to_summary()
        assert summary.session_formats == ("In-Person", "Flexible")


class TestProfileSerialization:
    def test_to_dict(self):
        draft = ProfileDraft(name="Ada", bio="Hi", location="London", goals="Learn")
        draft.add_teach_skill("Python")
        draft.add_learn_skill("Piano")
        draft.toggle_learning_style(LearningStyle.READING_WRITING)

        data = draft.to_dict()
        assert data == {
            "name": "Ada",
            "bio": "Hi",
            "location": "London",
            "avatar_ref": None,
            "teach_skills": ["Python"],
            "learn_skills": ["Piano"],
            "goals": "Learn",
            "learning_styles": ["Reading/Writing"],
            "session_formats": [],
        }
