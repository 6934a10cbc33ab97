"""Input cursor, quote-aware word scanner and syntax tree nodes for a small shell."""

__version__ = "0.1.0"