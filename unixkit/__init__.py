"""Small classic Unix command-line tools and their reusable parts."""

__version__ = "0.1.0"