"""
Mapping profile for business cards.

The photo is not part of any rule: AddBusinessCardRequest carries raw upload
bytes that the service encodes itself, and BusinessCardDto has no photo.
"""

from dtos.request.business_card_request import AddBusinessCardRequest
from dtos.response.business_card_response import BusinessCardDto
from models import BusinessCard
from .object_mapper import ObjectMapper

CARD_FIELDS = ("name", "email", "phone", "gender", "date_of_birth", "address")


def build_business_card_mapper() -> ObjectMapper:
    mapper = ObjectMapper()
    mapper.register(AddBusinessCardRequest, BusinessCard, CARD_FIELDS, reverse_map=True)
    mapper.register(BusinessCardDto, BusinessCard, CARD_FIELDS, reverse_map=True)
    return mapper


business_card_mapper = build_business_card_mapper()
