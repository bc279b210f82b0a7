"""Footprint API: identity, ownership and tile ordering for one-page profiles."""

__version__ = "0.1.0"
