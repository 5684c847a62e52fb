"""Per-language RSS 2.0 feeds for static site builds."""

__version__ = "0.1.0"
