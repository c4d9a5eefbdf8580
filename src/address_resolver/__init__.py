"""Address resolution engine: prefix search, proximity ranking, and confirmation."""

__version__ = "0.1.0"
