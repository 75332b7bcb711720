"""Classic algorithms and data structures with a collection of solved problems."""

__version__ = "0.1.0"