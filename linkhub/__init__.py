"""linkhub: render a personal link hub page from a YAML profile and a theme."""

__version__ = "0.1.0"
