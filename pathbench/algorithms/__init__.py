"""Preprocessing and search variants under benchmark."""

from .base import SearchOutcome, UnknownVariantError, Registry
from .preprocessing import PREPROCESSING, NONE
from .search import SEARCH

__all__ = [
    "SearchOutcome",
    "UnknownVariantError",
    "Registry",
    "PREPROCESSING",
    "SEARCH",
    "NONE",
]
