import re

_CUSTOM_FIELD_SUFFIX = re.compile(r"__c\Z", re.IGNORECASE)
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_WORD_START = re.compile(r"(^|\s)(\S)")


def format_field_label(field_name: str) -> str:
    """
    Turn a raw field identifier into a column label.

    ``EventType__c`` -> ``Event Type``, ``event_date__c`` -> ``Event Date``,
    ``URLPath`` -> ``URL Path``. Only the first character of each word is
    re-cased.
    """
    label = _CUSTOM_FIELD_SUFFIX.sub("", field_name)
    label = label.replace("_", " ")
    label = _CAMEL_BOUNDARY.sub(" ", label)
    return _WORD_START.sub(lambda match: match.group(1) + match.group(2).upper(), label)
