"""Source analysis: structural model building and classification."""

from .classifier import classify_class, classify_method, is_repository_method
from .tree_sitter import JavaSourceAnalyzer

__all__ = [
    "JavaSourceAnalyzer",
    "classify_class",
    "classify_method",
    "is_repository_method",
]
