"""Surface checkstyle findings on the lines a change actually touched."""

__version__ = "0.1.0"
