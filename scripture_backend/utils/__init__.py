"""Shared helpers: logging, generation constants, LLM output parsing."""
