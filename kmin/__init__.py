"""Selection of the k smallest values with linear search, quicksort and a min-heap."""

__version__ = "0.1.0"