"""SkillSwap: onboarding and marketplace core for a skill-exchange community."""

__version__ = "0.1.0"
