"""
Response DTOs

Shapes returned to API clients. The interchange record doubles as the
CSV/XML import row.
"""

from .business_card_response import BusinessCardDto, ResultResponse

__all__ = ["BusinessCardDto", "ResultResponse"]
