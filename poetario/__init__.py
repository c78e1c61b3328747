"""Interactive console catalogue of poetry books, authors, editions and publishers."""

__version__ = "0.1.0"
__all__ = ["control", "lista", "models"]