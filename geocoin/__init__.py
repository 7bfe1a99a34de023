"""Geocoin: grid canonicalization, deterministic cache spawning and coin transfer."""

__version__ = "0.1.0"
