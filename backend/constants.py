"""
Application-wide constants.

This module centralizes the magic strings and numbers used across the
business card API so routers, services and tests agree on them.
"""
from enum import Enum


class ImportFileType(str, Enum):
    """File formats accepted by the bulk import endpoint."""

    CSV = 'csv'
    XML = 'xml'

    @classmethod
    def parse(cls, value: str | None) -> 'ImportFileType | None':
        """Return the matching member (case-insensitive) or None."""
        normalized = (value or '').strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


class SearchField(str, Enum):
    """Text fields that can be searched with a contains match."""

    NAME = 'name'
    GENDER = 'gender'
    EMAIL = 'email'
    PHONE = 'phone'
    ADDRESS = 'address'

    @classmethod
    def parse(cls, value: str | None) -> 'SearchField | None':
        """Return the matching member (case-insensitive) or None."""
        normalized = (value or '').strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


class CsvExport:
    """Layout of exported CSV files"""

    HEADERS = ['Name', 'Email', 'Phone', 'Gender', 'DateOfBirth', 'Address']
    DATE_FORMAT = '%Y-%m-%d'
    FILENAME = 'BusinessCards.csv'
    CONTENT_TYPE = 'text/csv'


class FieldLimits:
    """Maximum column lengths of the business_cards table"""

    NAME = 100
    GENDER = 10
    EMAIL = 100
    PHONE = 15
    ADDRESS = 255
    LEGACY_PHOTO = 500


class ResultMessages:
    """Messages carried by result responses"""

    ENTITY_ADDED = "Entity added successfully."
    ENTITY_REMOVED = "Entity removed successfully."
    ADD_FAILED = "Failed to add entity: {error}"
    REMOVE_FAILED = "Failed to remove entity: {error}"
    CARD_NOT_FOUND = "Business card with id {card_id} not found."


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
