"""A side-scrolling platformer about a cancer cell evading the immune system."""

__version__ = "1.0.0"