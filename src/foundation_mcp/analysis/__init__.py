"""Pattern and refactoring analysis for Foundation MCP."""

from .features import COMPONENT_FEATURES, PLUGIN_FEATURES, FeatureRule, detect_features
from .patterns import PatternAnalyzer
from .refactoring import RefactoringAnalyzer

__all__ = [
    "COMPONENT_FEATURES",
    "PLUGIN_FEATURES",
    "FeatureRule",
    "PatternAnalyzer",
    "RefactoringAnalyzer",
    "detect_features",
]
