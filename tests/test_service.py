import pytest

from court_lookup.db import STATUS_ERROR, STATUS_SUCCESS
from court_lookup.errors import CaseNotFoundError, CaseValidationError, LookupFailedError
from court_lookup.service import CaseLookupService

from conftest import BrokenProvider, FailingStore


def test_lookup_returns_record_and_saved_entry(provider, store, settings):
    service = CaseLookupService(provider, store, settings)

    result = service.lookup("Civil Appeal", "12345", 2024)

    assert result.record.case_number == "Civil Appeal/12345/2024"
    assert result.saved.ok
    entry = store.get_by_id(result.saved.entry_id)
    assert entry.status == STATUS_SUCCESS
    assert entry.parties == result.record.parties


def test_inputs_are_stripped_before_use(provider, store, settings):
    service = CaseLookupService(provider, store, settings)

    result = service.lookup("  Civil Appeal ", " 12345", "2024")

    assert result.record.case_number == "Civil Appeal/12345/2024"
    assert store.get_by_id(result.saved.entry_id).year == 2024


def test_invalid_input_has_no_side_effects(provider, store, settings):
    service = CaseLookupService(provider, store, settings)

    with pytest.raises(CaseValidationError) as excinfo:
        service.lookup("", None, 2030)

    assert excinfo.value.status_code == 400
    assert excinfo.value.errors == ["Case type is required", "Case number is required", "Year must be between 1950 and 2025"]
    assert store.list_recent(10) == []


def test_store_failure_does_not_fail_lookup(provider, settings):
    with FailingStore(":memory:") as store:
        service = CaseLookupService(provider, store, settings)

        result = service.lookup("Civil Appeal", "12345", 2024)

    assert result.record.case_number == "Civil Appeal/12345/2024"
    assert not result.saved.ok
    assert result.saved.entry_id is None
    assert "disk I/O error" in result.saved.error


def test_provider_failure_is_logged_as_error_entry(store, settings):
    service = CaseLookupService(BrokenProvider(), store, settings)

    with pytest.raises(LookupFailedError) as excinfo:
        service.lookup("Civil Appeal", "12345", 2024)

    assert excinfo.value.status_code == 500
    [entry] = store.list_recent(10)
    assert entry.status == STATUS_ERROR
    assert entry.error_message == "portal exploded"


def test_get_entry_unknown_id(provider, store, settings):
    service = CaseLookupService(provider, store, settings)

    with pytest.raises(CaseNotFoundError):
        service.get_entry(12)


def test_history_read_failure_is_reported(provider, settings):
    from court_lookup.db import SqliteQueryStore

    service = CaseLookupService(provider, SqliteQueryStore(":memory:"), settings)

    with pytest.raises(LookupFailedError, match="query history"):
        service.history(10)
