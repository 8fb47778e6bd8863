import logging

from graphview.contracts.columns import ColumnType
from graphview.contracts.display import EmptyState, ErrorState, PopulatedState
from graphview.contracts.query import QueryResultEnvelope, TransportFailure
from graphview.table.normalizer import ResultNormalizer, extract_failure_message, normalize_result


def _rows(count: int) -> list[dict]:
    return [{"Field1__c": f"Value{i}", "Field2__c": i} for i in range(count)]


def test_success_with_more_rows_than_limit_is_truncated() -> None:
    state = normalize_result({"success": True, "data": _rows(3), "rowCount": 3}, 2)

    assert isinstance(state, PopulatedState)
    assert len(state.rows) == 2
    assert state.rows == _rows(3)[:2]
    assert state.truncated is True
    assert [column.field_name for column in state.columns] == ["Field1__c", "Field2__c"]
    assert state.columns[1].type is ColumnType.number


def test_result_exactly_at_limit_is_flagged_as_possibly_more() -> None:
    state = normalize_result({"success": True, "data": _rows(2), "rowCount": 2}, 2)

    assert isinstance(state, PopulatedState)
    assert state.truncated is True


def test_result_under_limit_is_not_truncated() -> None:
    state = normalize_result({"success": True, "data": _rows(1), "rowCount": 1}, 50)

    assert isinstance(state, PopulatedState)
    assert state.truncated is False
    assert state.rows == _rows(1)


def test_empty_success_is_empty_state() -> None:
    assert isinstance(normalize_result({"success": True, "data": [], "rowCount": 0}, 10), EmptyState)
    assert isinstance(normalize_result({"success": True, "rowCount": 0}, 10), EmptyState)


def test_row_count_claim_without_data_is_still_empty() -> None:
    assert isinstance(normalize_result({"success": True, "data": [], "rowCount": 5}, 10), EmptyState)


def test_query_failure_carries_message_and_type() -> None:
    state = normalize_result({"success": False, "errorMessage": "boom", "errorType": "X"}, 10)

    assert state == ErrorState(message="boom", kind="X")


def test_query_failure_defaults() -> None:
    state = normalize_result({"success": False, "errorMessage": ""}, 10)

    assert state == ErrorState(message="Unknown error occurred", kind="Error")


def test_transport_failure_uses_body_message() -> None:
    failure = {"body": {"message": "oops"}, "ok": False, "status": 400, "statusText": "Bad Request"}

    state = normalize_result(failure, 10)

    assert isinstance(state, ErrorState)
    assert state.message == "oops"
    assert state.kind == "Error"


def test_transport_failure_message_precedence() -> None:
    page_errors = TransportFailure.model_validate(
        {"body": {"pageErrors": [{"message": "first"}, {"message": "second"}]}, "message": "top"}
    )
    top_level = TransportFailure.model_validate({"message": "top"})
    text_body = TransportFailure.model_validate({"body": "plain text body"})

    assert extract_failure_message(page_errors) == "first"
    assert extract_failure_message(top_level) == "top"
    assert extract_failure_message(text_body) == "plain text body"
    assert extract_failure_message(TransportFailure()) == "Unknown error"


def test_empty_body_falls_through_to_top_level_message() -> None:
    failure = TransportFailure.model_validate({"body": {"pageErrors": []}, "message": "top"})

    assert extract_failure_message(failure) == "top"


def test_exception_outcome_becomes_transport_error() -> None:
    state = normalize_result(ConnectionError("network unreachable"), 10)

    assert state == ErrorState(message="network unreachable", kind="Error")


def test_unrecognised_outcome_never_raises(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        state = normalize_result(["not", "an", "envelope"], 10)

    assert state == ErrorState(message="Unknown error", kind="Error")
    assert "Discarding unrecognised query outcome" in caplog.text


def test_malformed_envelope_never_raises() -> None:
    state = normalize_result({"success": True, "data": "rows"}, 10)

    assert isinstance(state, ErrorState)


def test_envelope_models_are_accepted_directly() -> None:
    envelope = QueryResultEnvelope(success=True, data=_rows(4), row_count=4)

    state = ResultNormalizer().normalize(envelope, row_limit=3)

    assert isinstance(state, PopulatedState)
    assert len(state.rows) == 3


def test_explicit_column_config_is_used_for_populated_state() -> None:
    config = '[{"label": "Only", "fieldName": "Field2__c", "type": "number"}]'

    state = normalize_result({"success": True, "data": _rows(2)}, 10, config)

    assert isinstance(state, PopulatedState)
    assert [column.label for column in state.columns] == ["Only"]


def test_default_row_limit_comes_from_settings() -> None:
    state = normalize_result({"success": True, "data": _rows(60)})

    assert isinstance(state, PopulatedState)
    assert len(state.rows) == 50


def test_non_positive_row_limit_falls_back_to_default(caplog) -> None:
    envelope = {"success": True, "data": [{"A": 1}, {"A": 2}, {"A": 3}]}

    with caplog.at_level(logging.WARNING):
        for limit in (0, -1):
            state = normalize_result(envelope, limit)

            assert isinstance(state, PopulatedState)
            assert state.rows == [{"A": 1}, {"A": 2}, {"A": 3}]
            assert state.truncated is False

    assert "Invalid row limit" in caplog.text
