"""PyQt6 front-end for interactive games."""
