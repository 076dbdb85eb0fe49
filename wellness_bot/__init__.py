"""Wellness Bot - interactive wellness calculator."""

__version__ = "0.1.0"
