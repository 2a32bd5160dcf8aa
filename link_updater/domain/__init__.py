"""Domain package - immutable models."""

from .models import FileOutcome, ReplacementTarget, RunStatistics

__all__ = [
    'FileOutcome',
    'ReplacementTarget',
    'RunStatistics',
]
