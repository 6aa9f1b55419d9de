"""Validators module for filter labels and input paths"""

from .filter_validator import CategoryFilter, PathValidator, filter_vocabulary

__all__ = ["CategoryFilter", "PathValidator", "filter_vocabulary"]
