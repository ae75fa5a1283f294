"""Deterministic normalization, scoring and aggregation pipeline."""
