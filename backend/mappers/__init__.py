"""
Object mapping between DTOs and entities.
"""

from .object_mapper import ObjectMapper, MappingRule
from .business_card_mapper import business_card_mapper, CARD_FIELDS

__all__ = ["ObjectMapper", "MappingRule", "business_card_mapper", "CARD_FIELDS"]
