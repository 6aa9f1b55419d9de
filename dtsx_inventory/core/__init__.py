"""Core module for orchestrating extraction runs"""

from .extractor import PackageExtractor

__all__ = ["PackageExtractor"]
