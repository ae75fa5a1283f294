"""Vital-sign normalization and risk scoring."""

from .core.analyze import analyze

__all__ = ["analyze"]
