from .columns import ColumnDeriver, derive_columns
from .inference import infer_field_type
from .labels import format_field_label
from .normalizer import ResultNormalizer, extract_failure_message, normalize_result

__all__ = [
    "ColumnDeriver",
    "ResultNormalizer",
    "derive_columns",
    "extract_failure_message",
    "format_field_label",
    "infer_field_type",
    "normalize_result",
]
