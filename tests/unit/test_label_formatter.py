import pytest

from graphview.table.labels import format_field_label


@pytest.mark.parametrize(
    ("field_name", "expected"),
    [
        ("EventType__c", "Event Type"),
        ("EventDate__c", "Event Date"),
        ("event_type__c", "Event Type"),
        ("Field1__C", "Field1"),
        ("ssot__Id__c", "Ssot  Id"),
        ("name", "Name"),
        ("URLPath", "URL Path"),
        ("already Labelled", "Already Labelled"),
    ],
)
def test_format_field_label(field_name: str, expected: str) -> None:
    assert format_field_label(field_name) == expected


def test_suffix_is_only_stripped_at_the_end() -> None:
    assert format_field_label("my__custom_field") == "My  Custom Field"


def test_only_first_letters_are_recased() -> None:
    assert format_field_label("iPhone_model") == "I Phone Model"
    assert format_field_label("total_USD") == "Total USD"


def test_format_field_label_is_deterministic() -> None:
    assert format_field_label("EventType__c") == format_field_label("EventType__c")
    assert format_field_label(format_field_label("event_type__c")) == "Event Type"
