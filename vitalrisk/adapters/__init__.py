"""Boundary helpers between vendor payloads and the analysis core."""
