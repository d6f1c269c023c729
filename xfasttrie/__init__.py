"""An x-fast trie over 32-bit unsigned integer keys, with a benchmark against a sorted map."""

__version__ = "0.1.0"
__all__ = ["__version__"]