"""Text-mode grid game engine with an A* path search and two demo levels."""

__version__ = "0.1.0"
__all__ = ["__version__"]