"""
Internal Export DTOs

DTOs for handing rendered export files from services to the API layer.
"""

from dataclasses import dataclass


@dataclass
class ExportedFile:
    """
    Internal DTO for a downloadable file.

    The API layer turns this into an attachment response.
    """

    content: bytes
    content_type: str
    filename: str
