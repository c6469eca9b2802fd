"""General-purpose utilities: bit tests, range-checked casts, result codes, edit distance, MRU cache, CRC-32, string conversion and logging hooks."""

__version__ = "0.1.0"