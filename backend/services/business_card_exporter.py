"""
Business Card CSV Exporter

Renders business cards as a downloadable CSV file with the fixed column
layout Name,Email,Phone,Gender,DateOfBirth,Address. Values containing the
delimiter, quotes or line breaks are quoted by the csv module.
"""

import csv
import io
from typing import Iterable

from constants import CsvExport
from dtos.internal.export_dto import ExportedFile
from models import BusinessCard


class BusinessCardCsvExporter:
    """Writes business cards to CSV."""

    def render(self, cards: Iterable[BusinessCard]) -> str:
        buffer = io.StringIO(newline='')
        writer = csv.writer(buffer, lineterminator='\n')
        writer.writerow(CsvExport.HEADERS)
        for card in cards:
            writer.writerow([
                card.name,
                card.email,
                card.phone or '',
                card.gender or '',
                card.date_of_birth.strftime(CsvExport.DATE_FORMAT),
                card.address or '',
            ])
        return buffer.getvalue()

    def export(self, cards: Iterable[BusinessCard]) -> ExportedFile:
        """
        Build the downloadable CSV file.

        Args:
            cards: Cards to write, in output order

        Returns:
            ExportedFile with UTF-8 content and the fixed file name
        """
        return ExportedFile(
            content=self.render(cards).encode('utf-8'),
            content_type=CsvExport.CONTENT_TYPE,
            filename=CsvExport.FILENAME,
        )
