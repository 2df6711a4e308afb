import logging

import pytest

from utils.logging_utils import (
    ContextFilter,
    clear_logging_context,
    get_logging_context,
    log_operation,
    set_logging_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_logging_context()
    yield
    clear_logging_context()


def _record():
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_tags_record_with_request_id():
    set_logging_context(request_id="abc123")
    record = _record()

    assert ContextFilter().filter(record) is True
    assert record.request_id == "abc123"


def test_filter_uses_placeholder_outside_requests():
    record = _record()
    ContextFilter().filter(record)

    assert record.request_id == "-"


def test_context_accumulates_and_clears():
    set_logging_context(request_id="r1")
    set_logging_context(operation="import")

    assert get_logging_context() == {"request_id": "r1", "operation": "import"}
    clear_logging_context()
    assert get_logging_context() == {}


def test_log_operation_logs_completion(caplog):
    @log_operation("export_to_csv")
    def export(card_id):
        return card_id * 2

    with caplog.at_level(logging.DEBUG):
        assert export(card_id=21) == 42

    completed = [record for record in caplog.records if record.getMessage() == "Completed export_to_csv"]
    assert completed and completed[0].card_id == 21


def test_log_operation_logs_and_reraises_failures(caplog):
    @log_operation("remove_business_card")
    def remove():
        raise ValueError("gone")

    with caplog.at_level(logging.ERROR), pytest.raises(ValueError):
        remove()

    assert any("Failed remove_business_card: gone" in record.getMessage() for record in caplog.records)


def test_log_operation_reads_positional_context_arguments(caplog):
    class Exporter:
        @log_operation("export_to_csv")
        def export(self, card_id, file_type="csv"):
            return card_id

    with caplog.at_level(logging.INFO):
        Exporter().export(7)

    completed = [record for record in caplog.records if record.getMessage() == "Completed export_to_csv"]
    assert completed[0].card_id == 7
    assert completed[0].file_type == "csv"
