"""A timed watermelon-slicing arcade game."""

__version__ = "0.1.0"
__all__ = ["melon", "storage", "game", "app"]