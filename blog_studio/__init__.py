"""Gemini-backed blog article generator with WordPress publishing."""

__version__ = "0.1.0"
