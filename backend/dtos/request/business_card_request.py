"""
Business Card Request DTOs

DTOs for business-card API requests.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from constants import FieldLimits


class AddBusinessCardRequest(BaseModel):
    """
    Request DTO for creating a business card.

    The photo arrives as raw uploaded bytes; the service turns it into the
    stored Base64 JPEG.
    """

    name: str = Field(min_length=1, max_length=FieldLimits.NAME, description="Full name")
    email: str = Field(min_length=1, max_length=FieldLimits.EMAIL, description="Email address")
    phone: Optional[str] = Field(None, max_length=FieldLimits.PHONE, description="Phone number")
    gender: Optional[str] = Field(None, max_length=FieldLimits.GENDER, description="Gender")
    date_of_birth: date = Field(description="Date of birth")
    address: Optional[str] = Field(None, max_length=FieldLimits.ADDRESS, description="Postal address")
    photo_content: Optional[bytes] = Field(None, description="Raw bytes of the uploaded photo")
    photo_filename: Optional[str] = Field(None, description="Original name of the uploaded photo")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "phone": "123456789",
                "gender": "Male",
                "date_of_birth": "1993-01-01",
                "address": "123 Main St"
            }
        }


class RemoveBusinessCardRequest(BaseModel):
    """Request DTO for deleting a business card."""

    id: int = Field(description="ID of the business card to remove")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "id": 1
            }
        }
