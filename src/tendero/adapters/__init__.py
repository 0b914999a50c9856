"""Concrete adapters for TENDERO's ports."""
