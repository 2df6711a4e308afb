"""
Business Card Specifications

Concrete specifications for querying business cards.

Plain contains matches translate to SQL LIKE, which on SQLite ignores the
case of ASCII letters; the in-memory check folds ASCII case the same way.
Records whose field is NULL never match a contains or equals specification.
"""

import string
from datetime import date
from sqlalchemy import func
from models import BusinessCard
from .specifications import Specification

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold_ascii(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class FieldContainsSpec(Specification[BusinessCard]):
    """
    Specification for cards whose text field contains a substring.

    Matches like SQLite LIKE: ASCII letters compare without case, other
    characters compare exactly.
    """

    def __init__(self, field: str, value: str):
        """
        Initialize specification.

        Args:
            field: BusinessCard attribute name
            value: Substring to look for
        """
        self.field = field
        self.value = value

    def is_satisfied_by(self, card: BusinessCard) -> bool:
        current = getattr(card, self.field)
        return current is not None and _fold_ascii(self.value) in _fold_ascii(current)

    def to_sql_filter(self):
        return getattr(BusinessCard, self.field).contains(self.value, autoescape=True)


class FieldContainsIgnoreCaseSpec(FieldContainsSpec):
    """Specification for cards whose text field contains a substring, ignoring case."""

    def is_satisfied_by(self, card: BusinessCard) -> bool:
        current = getattr(card, self.field)
        return current is not None and self.value.lower() in current.lower()

    def to_sql_filter(self):
        column = getattr(BusinessCard, self.field)
        return func.lower(column).contains(self.value.lower(), autoescape=True)


class NameContainsSpec(FieldContainsSpec):
    """Specification for cards whose name contains a substring."""

    def __init__(self, value: str):
        super().__init__('name', value)


class PhoneContainsSpec(FieldContainsSpec):
    """Specification for cards whose phone contains a substring."""

    def __init__(self, value: str):
        super().__init__('phone', value)


class EmailContainsSpec(FieldContainsIgnoreCaseSpec):
    """Specification for cards whose email contains a substring, ignoring case."""

    def __init__(self, value: str):
        super().__init__('email', value)


class GenderEqualsSpec(Specification[BusinessCard]):
    """Specification for cards with a given gender, ignoring case."""

    def __init__(self, gender: str):
        self.gender = gender

    def is_satisfied_by(self, card: BusinessCard) -> bool:
        return card.gender is not None and card.gender.lower() == self.gender.lower()

    def to_sql_filter(self):
        return func.lower(BusinessCard.gender) == self.gender.lower()


class DateOfBirthEqualsSpec(Specification[BusinessCard]):
    """Specification for cards born on an exact date."""

    def __init__(self, date_of_birth: date):
        self.date_of_birth = date_of_birth

    def is_satisfied_by(self, card: BusinessCard) -> bool:
        return card.date_of_birth == self.date_of_birth

    def to_sql_filter(self):
        return BusinessCard.date_of_birth == self.date_of_birth
