"""Shared helper functions."""

from .env import env_flag, env_text

__all__ = ["env_flag", "env_text"]
