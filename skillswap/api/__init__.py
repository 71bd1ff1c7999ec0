"""Collaborator boundary for the SkillSwap core."""

from .client import SkillSwapClient

__all__ = ["SkillSwapClient"]
