"""DeepClean — recursively delete bin and obj build folders."""

__version__ = "1.0.0"
