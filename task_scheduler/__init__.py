"""Dependency-aware task scheduling with urgency ranking."""

__version__ = "0.1.0"
