"""Gammie — territory-claiming grid game with golden moves."""

__version__ = "0.1.0"
