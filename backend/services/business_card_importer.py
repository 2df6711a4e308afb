"""
Business Card Importer

Parses uploaded CSV and XML files into BusinessCardDto records.

CSV headers are matched case-insensitively, ignoring spaces and underscores,
so "DateOfBirth", "date_of_birth" and "Date Of Birth" all bind the same field
("dob" is accepted too). Unknown columns are ignored and missing optional
columns are left empty. When several columns bind the same field, the first
non-blank one is used.

XML input is a root element whose children are records, each record holding
one child element per field, e.g.
<ArrayOfBusinessCardCsvXmlDto><BusinessCardCsvXmlDto><Name>...</Name>...
Elements marked xsi:nil="true" are read as empty.
"""

import csv
import io
import logging
import xml.etree.ElementTree as ET
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from constants import ImportFileType
from dtos.response.business_card_response import BusinessCardDto
from exceptions import ValidationError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

FIELD_ALIASES = {
    'name': 'name',
    'email': 'email',
    'phone': 'phone',
    'gender': 'gender',
    'dateofbirth': 'date_of_birth',
    'dob': 'date_of_birth',
    'address': 'address',
}

XSI_NIL = '{http://www.w3.org/2001/XMLSchema-instance}nil'


def _normalize_key(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    key = raw.strip().lower().replace(' ', '').replace('_', '')
    return FIELD_ALIASES.get(key)


def _local_name(tag: str) -> str:
    return tag.rsplit('}', 1)[-1]


def parse_date(raw: Optional[str]) -> Optional[date]:
    """
    Parse a yyyy-MM-dd date or the date part of an ISO datetime.

    Returns:
        The date, or None for blank input

    Raises:
        ValueError: If the text is not a date
    """
    if raw is None or not raw.strip():
        return None
    text = raw.strip()
    for separator in ('T', ' '):
        if separator in text:
            text = text.split(separator, 1)[0]
            break
    return date.fromisoformat(text)


class BusinessCardImporter:
    """Parses import files into interchange records."""

    def parse(self, content: bytes, file_type: str) -> List[BusinessCardDto]:
        """
        Parse an uploaded file.

        Args:
            content: Raw file bytes
            file_type: "csv" or "xml", case-insensitive

        Returns:
            Parsed records in file order

        Raises:
            ValidationError: If the file is empty, unreadable or holds an invalid record
            UnsupportedFileTypeError: If file_type is neither csv nor xml
        """
        kind = ImportFileType.parse(file_type)
        if kind is None:
            raise UnsupportedFileTypeError(file_type)
        if not content:
            raise ValidationError("File is empty.")

        if kind == ImportFileType.CSV:
            records = self.parse_csv(content)
        else:
            records = self.parse_xml(content)

        logger.info(f"Parsed {len(records)} business card(s) from {kind.value} upload")
        return records

    def parse_csv(self, content: bytes) -> List[BusinessCardDto]:
        reader = csv.reader(io.StringIO(self._decode(content), newline=''))
        headers = next(reader, [])
        # Blank lines come back as empty rows
        rows = (list(zip(headers, row)) for row in reader if row)
        return self._build_records(rows)

    def parse_xml(self, content: bytes) -> List[BusinessCardDto]:
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise ValidationError(f"Invalid XML: {e}") from e

        # A root without nested elements is itself a single record.
        elements = list(root)
        if elements and not any(len(element) for element in elements):
            elements = [root]

        rows = (
            [
                (_local_name(field.tag), None if field.get(XSI_NIL) == 'true' else field.text)
                for field in element
            ]
            for element in elements
        )
        return self._build_records(rows)

    def _decode(self, content: bytes) -> str:
        try:
            return content.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise ValidationError(f"File is not valid UTF-8 text: {e}") from e

    def _collect_fields(self, pairs: Iterable[Tuple[str, Optional[str]]]) -> Dict[str, object]:
        """Bind raw (header, value) pairs to fields; the first non-blank value of a field wins."""
        values: Dict[str, object] = {}
        for header, value in pairs:
            key = _normalize_key(header)
            if isinstance(value, str):
                value = value.strip()
            if key is None or value in (None, ''):
                continue
            values.setdefault(key, value)
        return values

    def _build_records(self, rows: Iterable[Iterable[Tuple[str, Optional[str]]]]) -> List[BusinessCardDto]:
        return [
            self._build_record(self._collect_fields(pairs), record_number)
            for record_number, pairs in enumerate(rows, start=1)
        ]

    def _build_record(self, values: Dict[str, object], record_number: int) -> BusinessCardDto:
        raw_date = values.get('date_of_birth')
        try:
            values['date_of_birth'] = parse_date(raw_date)
        except ValueError as e:
            raise ValidationError(
                f"Record {record_number} has an invalid DateOfBirth '{raw_date}'.",
                invalid_fields={"date_of_birth": str(e)},
            ) from e

        try:
            return BusinessCardDto(**values)
        except PydanticValidationError as e:
            problems = {
                '.'.join(str(part) for part in error['loc']): error['msg']
                for error in e.errors()
            }
            summary = '; '.join(f"{field}: {msg}" for field, msg in problems.items())
            raise ValidationError(
                f"Record {record_number} is invalid: {summary}",
                invalid_fields=problems,
            ) from e
