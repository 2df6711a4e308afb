from datetime import date

import pytest

from dtos.request.business_card_request import AddBusinessCardRequest
from dtos.response.business_card_response import BusinessCardDto
from mappers.business_card_mapper import business_card_mapper
from mappers.object_mapper import ObjectMapper
from models import BusinessCard


def test_request_maps_to_entity_without_photo():
    request = AddBusinessCardRequest(
        name="John Doe",
        email="john@example.com",
        date_of_birth=date(1993, 1, 1),
        photo_content=b"raw",
        photo_filename="me.png",
    )

    card = business_card_mapper.map(request, BusinessCard)

    assert isinstance(card, BusinessCard)
    assert card.name == "John Doe"
    assert card.date_of_birth == date(1993, 1, 1)
    assert card.phone is None
    assert card.photo is None


def test_entity_maps_to_dto(make_card):
    dto = business_card_mapper.map(make_card(photo="abc"), BusinessCardDto)

    assert dto == BusinessCardDto(
        name="John Doe",
        email="john@example.com",
        phone="123456789",
        gender="Male",
        date_of_birth=date(1993, 1, 1),
        address="123 Main St",
    )


def test_reverse_rules_are_registered():
    assert business_card_mapper.has_rule(BusinessCard, AddBusinessCardRequest)
    assert business_card_mapper.has_rule(BusinessCardDto, BusinessCard)


def test_renamed_fields():
    mapper = ObjectMapper().register(BusinessCard, dict, [("name", "full_name"), "email"])

    assert mapper.map(BusinessCard(name="A", email="a@b.c"), dict) == {"full_name": "A", "email": "a@b.c"}


def test_unregistered_pair_raises():
    with pytest.raises(LookupError):
        ObjectMapper().map(BusinessCard(name="A"), BusinessCardDto)


def test_map_all_keeps_order(make_card):
    dtos = business_card_mapper.map_all([make_card(name="B"), make_card(name="A")], BusinessCardDto)

    assert [dto.name for dto in dtos] == ["B", "A"]
