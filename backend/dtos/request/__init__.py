"""
Request DTOs

Shapes bound from incoming business-card requests.
"""

from .business_card_request import AddBusinessCardRequest, RemoveBusinessCardRequest

__all__ = ["AddBusinessCardRequest", "RemoveBusinessCardRequest"]
