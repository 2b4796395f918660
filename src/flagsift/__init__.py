"""flagsift - boolean flag and positional argument classifier."""

from .argument_classifier import ArgumentClassifier
from .classification_result import ClassificationResult

__all__ = ["ArgumentClassifier", "ClassificationResult"]
