"""Nebula: deterministic galaxy generation and per-cycle economy simulation."""

__version__ = "0.1.0"
