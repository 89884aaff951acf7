"""Catalog CLI — browse the product list from a terminal."""

__version__ = "0.1.0"
