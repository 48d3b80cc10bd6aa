"""Pipeline components for PDF page cleaning."""

from .pipeline import Pipeline

__all__ = [
    "Pipeline",
]
