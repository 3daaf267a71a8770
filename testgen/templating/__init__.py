"""Text assembly for generated test suites."""

from .builder import SkeletonBuilder, assemble, lower_first

__all__ = ["SkeletonBuilder", "assemble", "lower_first"]
