"""A falling-block puzzle game: board and piece rules with a pygame front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]