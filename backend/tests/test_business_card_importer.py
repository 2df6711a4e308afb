from datetime import date

import pytest

from exceptions import UnsupportedFileTypeError, ValidationError
from services.business_card_importer import BusinessCardImporter, parse_date


CSV_CONTENT = (
    "Name,Email,Phone,Gender,DateOfBirth,Address\n"
    "John Doe,john@example.com,123456789,Male,1993-01-01,123 Main St\n"
    'Jane Smith,jane@example.com,,Female,1988-07-14T00:00:00,"9 Elm Road, Flat 2"\n'
).encode("utf-8")

XML_CONTENT = b"""<?xml version="1.0" encoding="utf-8"?>
<ArrayOfBusinessCardCsvXmlDto xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <BusinessCardCsvXmlDto>
    <Name>John Doe</Name>
    <Email>john@example.com</Email>
    <Phone>123456789</Phone>
    <Gender xsi:nil="true" />
    <DateOfBirth>1993-01-01T00:00:00</DateOfBirth>
    <Address>123 Main St</Address>
  </BusinessCardCsvXmlDto>
  <BusinessCardCsvXmlDto>
    <Name>Jane Smith</Name>
    <Email>jane@example.com</Email>
    <DateOfBirth>1988-07-14</DateOfBirth>
  </BusinessCardCsvXmlDto>
</ArrayOfBusinessCardCsvXmlDto>
"""


@pytest.fixture
def importer():
    return BusinessCardImporter()


class TestParseDate:
    def test_plain_date(self):
        assert parse_date("1993-01-01") == date(1993, 1, 1)

    def test_datetime_keeps_date_part(self):
        assert parse_date("1993-01-01T10:30:00") == date(1993, 1, 1)
        assert parse_date("1993-01-01 10:30:00") == date(1993, 1, 1)

    def test_blank_is_none(self):
        assert parse_date("  ") is None

    def test_garbage_raises(self):
        with pytest.raises(ValueError):
            parse_date("01/02/1993")


class TestCsv:
    def test_rows_become_records(self, importer):
        records = importer.parse(CSV_CONTENT, "csv")

        assert [record.name for record in records] == ["John Doe", "Jane Smith"]
        assert records[1].phone is None
        assert records[1].date_of_birth == date(1988, 7, 14)
        assert records[1].address == "9 Elm Road, Flat 2"

    def test_file_type_is_case_insensitive(self, importer):
        assert len(importer.parse(CSV_CONTENT, "CSV")) == 2

    def test_header_variants_and_bom(self, importer):
        content = "\ufeffname,EMAIL,date_of_birth,Extra\nA,a@b.c,2001-03-04,ignored\n".encode("utf-8")

        records = importer.parse(content, "csv")

        assert records[0].name == "A"
        assert records[0].date_of_birth == date(2001, 3, 4)

    def test_header_only_gives_no_records(self, importer):
        assert importer.parse(b"Name,Email,DateOfBirth\n", "csv") == []

    def test_invalid_date_names_record(self, importer):
        content = b"Name,Email,DateOfBirth\nA,a@b.c,2001-03-04\nB,b@c.d,not-a-date\n"

        with pytest.raises(ValidationError, match="Record 2 has an invalid DateOfBirth"):
            importer.parse(content, "csv")

    def test_missing_required_field(self, importer):
        content = b"Name,Email,DateOfBirth\n,a@b.c,2001-03-04\n"

        with pytest.raises(ValidationError, match="Record 1 is invalid"):
            importer.parse(content, "csv")

    def test_too_long_field(self, importer):
        content = f"Name,Email,DateOfBirth,Phone\nA,a@b.c,2001-03-04,{'1' * 16}\n".encode("utf-8")

        with pytest.raises(ValidationError) as exc_info:
            importer.parse(content, "csv")
        assert "phone" in exc_info.value.details["invalid_fields"]

    def test_not_utf8(self, importer):
        with pytest.raises(ValidationError, match="UTF-8"):
            importer.parse(b"Name\n\xff\xfe\xfa", "csv")


class TestXml:
    def test_array_layout(self, importer):
        records = importer.parse(XML_CONTENT, "xml")

        assert len(records) == 2
        assert records[0].gender is None
        assert records[0].date_of_birth == date(1993, 1, 1)
        assert records[1].address is None

    def test_single_record_root(self, importer):
        content = b"<BusinessCard><Name>A</Name><Email>a@b.c</Email><DateOfBirth>2001-03-04</DateOfBirth></BusinessCard>"

        records = importer.parse(content, "xml")

        assert [record.email for record in records] == ["a@b.c"]

    def test_malformed(self, importer):
        with pytest.raises(ValidationError, match="Invalid XML"):
            importer.parse(b"<Cards><Card>", "xml")


class TestRejectedInput:
    def test_unknown_file_type(self, importer):
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            importer.parse(CSV_CONTENT, "json")
        assert exc_info.value.message == "Unsupported file type."

    def test_unknown_type_checked_before_emptiness(self, importer):
        with pytest.raises(UnsupportedFileTypeError):
            importer.parse(b"", "txt")

    def test_empty_file(self, importer):
        with pytest.raises(ValidationError, match="File is empty."):
            importer.parse(b"", "csv")


class TestDuplicateColumns:
    def test_first_non_blank_value_wins(self, importer):
        content = b"Name,Email,DateOfBirth,dob\nA,a@b.c,2001-03-04,\nB,b@c.d,,2002-05-06\n"

        records = importer.parse(content, "csv")

        assert [record.date_of_birth for record in records] == [date(2001, 3, 4), date(2002, 5, 6)]

    def test_repeated_header_keeps_first_value(self, importer):
        content = b"Name,Email,DateOfBirth,Name\nFirst,a@b.c,2001-03-04,Second\n"

        assert importer.parse(content, "csv")[0].name == "First"

    def test_short_row_leaves_optional_fields_empty(self, importer):
        content = b"Name,Email,DateOfBirth,Phone,Address\nA,a@b.c,2001-03-04\n"

        record = importer.parse(content, "csv")[0]
        assert record.phone is None
        assert record.address is None

    def test_blank_lines_are_skipped(self, importer):
        content = b"Name,Email,DateOfBirth\n\nA,a@b.c,2001-03-04\n\n"

        assert len(importer.parse(content, "csv")) == 1
