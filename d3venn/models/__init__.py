from .entry import (
    OPTIONAL_FIELDS,
    REQUIRED_FIELDS,
    Entry,
    entries_from_table,
    entries_to_table,
    table_from_records,
)
from .options import VennOptions
from .results import (
    CheckResult,
    Diagnostic,
    Rejected,
    Repaired,
    Valid,
    VennDataWarning,
    VennInputError,
)

__all__ = [
    "OPTIONAL_FIELDS",
    "REQUIRED_FIELDS",
    "Entry",
    "entries_from_table",
    "entries_to_table",
    "table_from_records",
    "VennOptions",
    "CheckResult",
    "Diagnostic",
    "Rejected",
    "Repaired",
    "Valid",
    "VennDataWarning",
    "VennInputError",
]
