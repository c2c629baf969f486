# src/moneycalc/resources/__init__.py
"""Bundled static content (help page)."""
