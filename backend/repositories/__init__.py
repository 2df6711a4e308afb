"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and the specifications used to filter them.
"""

from .base_repository import BaseRepository
from .business_card_repository import BusinessCardRepository
from .specifications import Specification, TrueSpecification, all_of

__all__ = [
    "BaseRepository",
    "BusinessCardRepository",
    "Specification",
    "TrueSpecification",
    "all_of",
]
