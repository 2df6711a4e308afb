"""
Service Interfaces

Abstract base classes for the service layer. Routers depend on these so a
test can swap in a fake implementation through FastAPI dependency overrides.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from dtos.internal.export_dto import ExportedFile
from dtos.request.business_card_request import AddBusinessCardRequest, RemoveBusinessCardRequest
from dtos.response.business_card_response import BusinessCardDto, ResultResponse


class IBusinessCardService(ABC):
    """
    Interface for business card management.
    """

    @abstractmethod
    def add_business_card(self, request: AddBusinessCardRequest) -> ResultResponse:
        """
        Store a new business card, encoding its photo if one was uploaded.

        Raises:
            ValidationError: If the uploaded photo is not an image
        """
        pass

    @abstractmethod
    def import_business_cards(self, content: bytes, file_type: str) -> List[BusinessCardDto]:
        """
        Parse a CSV or XML upload and store every record in it.

        Raises:
            ValidationError: If the file is empty or holds an invalid record
            UnsupportedFileTypeError: If file_type is neither csv nor xml
            BusinessCardImportError: If a record cannot be stored
        """
        pass

    @abstractmethod
    def get_all_business_cards(self) -> List[BusinessCardDto]:
        pass

    @abstractmethod
    def search_business_cards(self, term: str, search_string: str) -> List[BusinessCardDto]:
        """
        Find cards whose `term` field contains `search_string`.

        Raises:
            InvalidArgumentError: If term is not a searchable field
        """
        pass

    @abstractmethod
    def filter_business_cards(
        self,
        name: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        phone: Optional[str] = None,
        gender: Optional[str] = None,
        email: Optional[str] = None,
    ) -> List[BusinessCardDto]:
        """Find cards matching every supplied criterion."""
        pass

    @abstractmethod
    def remove_business_card(self, request: RemoveBusinessCardRequest) -> ResultResponse:
        pass

    @abstractmethod
    def export_to_csv(self, card_id: int) -> ExportedFile:
        """
        Export one card as CSV.

        Raises:
            NotFoundError: If no card has this id
        """
        pass

    @abstractmethod
    def export_all_to_csv(self) -> ExportedFile:
        pass
