"""
Business Card Response DTOs

DTOs for business-card API responses.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from constants import FieldLimits


class BusinessCardDto(BaseModel):
    """
    Data-interchange shape of a business card.

    Used for CSV/XML import rows and for list, search and filter results.
    Carries neither the identifier nor the photo.
    """

    name: str = Field(min_length=1, max_length=FieldLimits.NAME, description="Full name")
    email: str = Field(min_length=1, max_length=FieldLimits.EMAIL, description="Email address")
    phone: Optional[str] = Field(None, max_length=FieldLimits.PHONE, description="Phone number")
    gender: Optional[str] = Field(None, max_length=FieldLimits.GENDER, description="Gender")
    date_of_birth: date = Field(description="Date of birth")
    address: Optional[str] = Field(None, max_length=FieldLimits.ADDRESS, description="Postal address")

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from ORM models


class ResultResponse(BaseModel):
    """
    Response DTO for operations that report success or failure.

    Failures are data, not errors: callers read `succeeded` and `message`.
    """

    succeeded: bool = Field(description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="Outcome detail or error text")
