"""Deterministic EDSS scoring core."""
