"""Latest blog post and changelog discovery for documentation sites."""

__version__ = "0.1.0"
