"""
Business card repository.
"""

from sqlalchemy.orm import Session

from models import BusinessCard
from .base_repository import BaseRepository


class BusinessCardRepository(BaseRepository[BusinessCard]):
    """Repository for BusinessCard model operations."""

    def __init__(self, db: Session):
        super().__init__(db, BusinessCard)
