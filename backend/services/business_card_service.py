"""
Business Card Service

Business logic for business cards: photo encoding on create, bulk import,
search and filter predicates, removal and CSV export. Data access goes
through BusinessCardRepository; DTO/entity conversion through the mapper.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from constants import ResultMessages, SearchField
from dtos.internal.export_dto import ExportedFile
from dtos.request.business_card_request import AddBusinessCardRequest, RemoveBusinessCardRequest
from dtos.response.business_card_response import BusinessCardDto, ResultResponse
from exceptions import BusinessCardImportError, InvalidArgumentError, NotFoundError
from mappers.business_card_mapper import business_card_mapper
from mappers.object_mapper import ObjectMapper
from models import BusinessCard
from repositories.business_card_repository import BusinessCardRepository
from repositories.business_card_specifications import (
    DateOfBirthEqualsSpec,
    EmailContainsSpec,
    FieldContainsSpec,
    GenderEqualsSpec,
    NameContainsSpec,
    PhoneContainsSpec,
)
from repositories.specifications import Specification, all_of
from services.business_card_exporter import BusinessCardCsvExporter
from services.business_card_importer import BusinessCardImporter
from services.interfaces import IBusinessCardService
from services.photo_encoder import PhotoEncoder
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class BusinessCardService(IBusinessCardService):
    """Service for business-card business logic."""

    def __init__(
        self,
        db: Session,
        repository: Optional[BusinessCardRepository] = None,
        mapper: Optional[ObjectMapper] = None,
        photo_encoder: Optional[PhotoEncoder] = None,
        importer: Optional[BusinessCardImporter] = None,
        exporter: Optional[BusinessCardCsvExporter] = None,
    ):
        """
        Initialize BusinessCardService.

        Args:
            db: Database session
            repository: Card repository (defaults to one bound to db)
            mapper: DTO/entity mapper
            photo_encoder: Encoder for uploaded photos
            importer: CSV/XML parser
            exporter: CSV writer
        """
        self.db = db
        self.card_repo = repository or BusinessCardRepository(db)
        self.mapper = mapper or business_card_mapper
        self.photo_encoder = photo_encoder or PhotoEncoder()
        self.importer = importer or BusinessCardImporter()
        self.exporter = exporter or BusinessCardCsvExporter()

    @log_operation("add_business_card")
    def add_business_card(self, request: AddBusinessCardRequest) -> ResultResponse:
        card = self.mapper.map(request, BusinessCard)
        if request.photo_content:
            card.photo = self.photo_encoder.encode(request.photo_content, request.photo_filename)
        return self.card_repo.add(card)

    @log_operation("import_business_cards")
    def import_business_cards(self, content: bytes, file_type: str) -> List[BusinessCardDto]:
        """
        Parse an upload and store its records one by one.

        The first record that fails to store aborts the import. Records stored
        before it are kept, since each insert commits on its own.
        """
        records = self.importer.parse(content, file_type)

        for record_number, record in enumerate(records, start=1):
            result = self.card_repo.add(self.mapper.map(record, BusinessCard))
            if not result.succeeded:
                logger.warning(
                    f"Import aborted at record {record_number} of {len(records)}: {result.message}"
                )
                raise BusinessCardImportError(
                    record_number, result.message or "unknown error", imported_count=record_number - 1
                )

        logger.info(f"Imported {len(records)} business card(s)")
        return records

    @log_operation("get_all_business_cards")
    def get_all_business_cards(self) -> List[BusinessCardDto]:
        return self.mapper.map_all(self.card_repo.get_all(), BusinessCardDto)

    @log_operation("search_business_cards")
    def search_business_cards(self, term: str, search_string: str) -> List[BusinessCardDto]:
        field = SearchField.parse(term)
        if field is None:
            supported = ", ".join(member.value for member in SearchField)
            raise InvalidArgumentError(
                "search term", term, f"Invalid search term '{term}'. Supported terms: {supported}"
            )

        spec = FieldContainsSpec(field.value, search_string or "")
        return self.mapper.map_all(self.card_repo.get_by_filter(spec), BusinessCardDto)

    def build_filter_specification(
        self,
        name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        phone: Optional[str] = None,
        gender: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Specification[BusinessCard]:
        """
        AND together the supplied criteria.

        Blank or omitted criteria are left out, which makes them always true.
        """
        specs: List[Specification[BusinessCard]] = []
        if name:
            specs.append(NameContainsSpec(name))
        if date_of_birth is not None:
            specs.append(DateOfBirthEqualsSpec(date_of_birth))
        if phone:
            specs.append(PhoneContainsSpec(phone))
        if gender:
            specs.append(GenderEqualsSpec(gender))
        if email:
            specs.append(EmailContainsSpec(email))
        return all_of(specs)

    @log_operation("filter_business_cards")
    def filter_business_cards(
        self,
        name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        phone: Optional[str] = None,
        gender: Optional[str] = None,
        email: Optional[str] = None,
    ) -> List[BusinessCardDto]:
        spec = self.build_filter_specification(name, date_of_birth, phone, gender, email)
        return self.mapper.map_all(self.card_repo.get_by_filter(spec), BusinessCardDto)

    @log_operation("remove_business_card")
    def remove_business_card(self, request: RemoveBusinessCardRequest) -> ResultResponse:
        card = self.card_repo.get_by_id(request.id)
        if card is None:
            return ResultResponse(
                succeeded=False,
                message=ResultMessages.CARD_NOT_FOUND.format(card_id=request.id),
            )
        return self.card_repo.remove(card)

    @log_operation("export_to_csv")
    def export_to_csv(self, card_id: int) -> ExportedFile:
        card = self.card_repo.get_by_id(card_id)
        if card is None:
            raise NotFoundError("Business card", card_id)
        return self.exporter.export([card])

    @log_operation("export_all_to_csv")
    def export_all_to_csv(self) -> ExportedFile:
        return self.exporter.export(self.card_repo.get_all())
