"""Verse symbolism prompts (JSON response)."""

from scripture_backend.agents.imagery.prompts import build_imagery_request

__all__ = ["build_imagery_request"]
