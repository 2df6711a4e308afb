"""
Internal DTOs

Service-to-router shapes that are never serialized as JSON.
"""

from .export_dto import ExportedFile

__all__ = ["ExportedFile"]
