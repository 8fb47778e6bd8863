import json
import logging

from graphview.contracts.columns import ColumnDefinition, ColumnType, dump_columns, parse_column_config
from graphview.table.columns import ColumnDeriver, derive_columns


_ROWS = [
    {"EventType__c": "Click", "EventDate__c": "2024-01-01", "Score__c": 7, "Active__c": True},
    {"EventType__c": "View", "EventDate__c": None, "Score__c": "n/a", "Active__c": None},
]


def test_auto_derives_columns_from_first_row_in_key_order() -> None:
    columns = derive_columns(None, _ROWS)

    assert [column.field_name for column in columns] == [
        "EventType__c",
        "EventDate__c",
        "Score__c",
        "Active__c",
    ]
    assert [column.label for column in columns] == ["Event Type", "Event Date", "Score", "Active"]
    assert [column.type for column in columns] == [
        ColumnType.text,
        ColumnType.date,
        ColumnType.number,
        ColumnType.boolean,
    ]


def test_later_rows_do_not_change_column_types() -> None:
    rows = [{"Amount__c": None}, {"Amount__c": 12.5}]

    columns = derive_columns(None, rows)

    assert columns[0].type is ColumnType.text


def test_empty_rows_without_config_give_empty_schema() -> None:
    assert derive_columns(None, []) == []
    assert derive_columns("", []) == []


def test_valid_config_is_returned_verbatim_regardless_of_rows() -> None:
    config = json.dumps(
        [
            {"label": "Kind", "fieldName": "Unrelated__c", "type": "email"},
            {"label": "When", "fieldName": "Other__c", "type": "date-local", "initialWidth": 120},
        ]
    )

    columns = derive_columns(config, _ROWS)

    assert columns == parse_column_config(config)
    assert dump_columns(columns) == json.loads(config)


def test_valid_config_applies_even_without_rows() -> None:
    config = '[{"label": "Name", "fieldName": "Name__c", "type": "text"}]'

    assert derive_columns(config, []) == [
        ColumnDefinition(label="Name", field_name="Name__c", type=ColumnType.text)
    ]


def test_malformed_config_falls_back_to_auto_derivation(caplog) -> None:
    with caplog.at_level(logging.ERROR):
        columns = derive_columns("[{not json", _ROWS)

    assert columns == derive_columns(None, _ROWS)
    assert "Invalid column configuration JSON" in caplog.text


def test_config_with_wrong_shape_falls_back_to_auto_derivation() -> None:
    assert derive_columns('{"label": "x"}', _ROWS) == derive_columns(None, _ROWS)
    assert derive_columns('[{"label": "x", "fieldName": "y", "type": "currency"}]', _ROWS) == (
        derive_columns(None, _ROWS)
    )


def test_diagnostics_go_to_the_injected_logger() -> None:
    records: list[logging.LogRecord] = []

    class _Capture(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    logger = logging.getLogger("tests.column_deriver")
    logger.propagate = False
    logger.addHandler(_Capture())

    ColumnDeriver(logger=logger).derive("nope", _ROWS)

    assert len(records) == 1
    assert records[0].levelno == logging.ERROR


def test_config_without_type_is_dumped_unchanged() -> None:
    config = '[{"label": "Name", "fieldName": "Name__c"}]'

    columns = derive_columns(config, _ROWS)

    assert columns[0].type is ColumnType.text
    assert dump_columns(columns) == json.loads(config)


def test_generated_columns_dump_every_key() -> None:
    assert dump_columns(derive_columns(None, _ROWS[:1]))[0] == {
        "label": "Event Type",
        "fieldName": "EventType__c",
        "type": "text",
    }
