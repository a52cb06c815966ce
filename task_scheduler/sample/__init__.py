"""Sample task data."""

from .generator import SampleDataGenerator

__all__ = ['SampleDataGenerator']
