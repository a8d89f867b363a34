"""Verse backstory prompts (JSON response)."""

from scripture_backend.agents.context.prompts import CONTEXT_FIELDS, build_context_request

__all__ = ["CONTEXT_FIELDS", "build_context_request"]
