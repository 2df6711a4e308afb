"""
Dependency injection providers for FastAPI.

Routers receive repositories and services through these factories, so tests
can replace them with `app.dependency_overrides`.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from repositories.business_card_repository import BusinessCardRepository
from services.interfaces import IBusinessCardService
from services.business_card_service import BusinessCardService


def get_business_card_repository(db: Session = Depends(get_db)) -> BusinessCardRepository:
    """
    Factory function for creating BusinessCardRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        BusinessCardRepository instance
    """
    return BusinessCardRepository(db)


def get_business_card_service(
    repository: BusinessCardRepository = Depends(get_business_card_repository),
) -> IBusinessCardService:
    """
    Factory function for creating BusinessCardService instances.

    Args:
        repository: Card repository (injected)

    Returns:
        IBusinessCardService: Business card service implementation
    """
    return BusinessCardService(repository.db, repository=repository)
