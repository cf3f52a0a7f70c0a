"""In-place sorting algorithms for mutable sequences: simple sorts in basic, quicksort and introsort in quick."""

__version__ = "0.1.0"
__all__ = ["basic", "quick"]